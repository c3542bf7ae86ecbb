"""Annual report command."""

from datetime import date

import click
from superjofi.cli.commands.ledger import echo_totals
from superjofi.cli.error_handling import domain_errors
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import CategoryAmount
from superjofi.domain.entry import EntryService
from superjofi.domain.report import ReportService
from superjofi.utils.formatters import format_currency, month_name


def _echo_breakdown(title: str, rows: tuple[CategoryAmount, ...]) -> None:
    click.echo(f"\n{title}:")
    if not rows:
        click.echo("  (no entries)")
        return
    total = sum(row.value for row in rows)
    for row in rows:
        share = (row.value / total * 100) if total else 0
        click.echo(f"  {row.name[:30]:<30} {format_currency(row.value):>18} {share:>6.1f}%")


@click.command("report")
@click.option("--year", type=int, help="Year of the report; defaults to the current year")
@click.option("--month", type=int, help="Month number (1-12) to detail; defaults to the current month")
@click.pass_context
def report(ctx, year: int | None, month: int | None):
    """Show the monthly series of a year and the breakdown of one month.

    Examples:
        superjofi report
        superjofi report --year 2024 --month 3
    """
    db = ctx.obj["db"]
    report_service = ReportService(EntryService(db), CategoryService(db))

    if month is not None and not 1 <= month <= 12:
        click.echo(f"Error: Invalid month {month}: use 1 to 12.", err=True)
        ctx.exit(1)

    year = date.today().year if year is None else year
    with domain_errors(ctx):
        annual = report_service.annual_report(year, None if month is None else month - 1)

    click.echo(f"\nRelatório {annual.year}")
    click.echo("-" * 80)
    click.echo(f"{'Mês':<12} {'Receitas':>16} {'Despesas':>16} {'Compras':>16} {'Saldo':>16}")
    click.echo("-" * 80)
    for bucket in annual.series:
        click.echo(
            f"{month_name(bucket.month):<12} {format_currency(bucket.income):>16} "
            f"{format_currency(bucket.expense):>16} {format_currency(bucket.purchase):>16} "
            f"{format_currency(bucket.balance):>16}"
        )
    click.echo("-" * 80)
    totals = annual.annual_totals
    click.echo(
        f"{'Total':<12} {format_currency(totals.income):>16} "
        f"{format_currency(totals.expense):>16} {format_currency(totals.purchase):>16} "
        f"{format_currency(totals.balance):>16}"
    )

    click.echo(f"\n{month_name(annual.focus_month)} {annual.year}")
    echo_totals(annual.focus_totals)

    _echo_breakdown("Despesas por categoria", annual.expense_breakdown)
    _echo_breakdown("Compras por categoria", annual.purchase_breakdown)
    _echo_breakdown("Receitas por categoria", annual.income_breakdown)


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
