"""Monthly ledger command."""

import click
from superjofi.cli.period_filters import resolve_cli_period
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import CategoryKind, EntryType, Totals, kind_for
from superjofi.domain.entry import EntryService
from superjofi.domain.report import ReportService
from superjofi.utils.formatters import format_currency, format_date, format_signed_currency


MISSING_NAME = "N/A"

TYPE_LABELS = {
    EntryType.INCOME: "Receita",
    EntryType.EXPENSE: "Despesa",
    EntryType.PURCHASE: "Compra",
}


def echo_totals(totals: Totals) -> None:
    """Print the per-type totals and the balance of a period."""
    click.echo(f"{'Receitas:':<12} {format_currency(totals.income):>18}")
    click.echo(f"{'Despesas:':<12} {format_currency(totals.expense):>18}")
    click.echo(f"{'Compras:':<12} {format_currency(totals.purchase):>18}")
    click.echo(f"{'Saldo:':<12} {format_currency(totals.balance):>18}")
    if totals.is_negative:
        click.echo("Warning: the month is closing negative.", err=True)


@click.command("ledger")
@click.option("--month", type=int, help="Month number (1-12); defaults to the current month")
@click.option("--year", type=int, help="Year; defaults to the current year")
@click.option("--this-month", is_flag=True, help="Show the current month")
@click.option("--last-month", is_flag=True, help="Show the previous month")
@click.option("--next-month", is_flag=True, help="Show the next month")
@click.option("--search", default="", help="Only entries whose description or client contains this text")
@click.option("--verbose", "-v", is_flag=True, help="Show payment method, bank and entry IDs")
@click.pass_context
def ledger(
    ctx,
    month: int | None,
    year: int | None,
    this_month: bool,
    last_month: bool,
    next_month: bool,
    search: str,
    verbose: bool,
):
    """List the entries of one month, newest first, with totals.

    Examples:
        superjofi ledger
        superjofi ledger --month 3 --year 2024
        superjofi ledger --last-month --search "maria"
    """
    db = ctx.obj["db"]
    period = resolve_cli_period(
        ctx,
        month=month,
        year=year,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "next-month": next_month,
        },
    )

    report_service = ReportService(EntryService(db), CategoryService(db))
    view = report_service.ledger(period, search_term=search)
    chart = report_service.category_service.chart()

    click.echo(f"\nLançamentos - {period.label}")
    if search:
        click.echo(f"Search: '{search}'")

    if not view.entries:
        click.echo("No entries found.")
        return

    click.echo("-" * 110)
    if verbose:
        click.echo(
            f"{'ID':<6} {'Date':<11} {'Type':<8} {'Category':<18} {'Payment':<12} "
            f"{'Bank':<14} {'Description':<20} {'Value':>16}"
        )
    else:
        click.echo(
            f"{'Date':<11} {'Type':<8} {'Category':<20} {'Client':<20} "
            f"{'Description':<28} {'Value':>18}"
        )
    click.echo("-" * 110)

    for entry in view.entries:
        category_name = chart.resolve(kind_for(entry.type), entry.category_id) or MISSING_NAME
        value_str = format_signed_currency(entry.value, entry.type == EntryType.INCOME)
        if verbose:
            payment_name = chart.resolve(CategoryKind.PAYMENT_METHOD, entry.payment_method_id) or MISSING_NAME
            bank_name = chart.resolve(CategoryKind.BANK, entry.bank_id) or MISSING_NAME
            click.echo(
                f"{entry.id:<6} {format_date(entry.date):<11} {TYPE_LABELS[entry.type]:<8} "
                f"{category_name[:18]:<18} {payment_name[:12]:<12} {bank_name[:14]:<14} "
                f"{entry.description[:20]:<20} {value_str:>16}"
            )
        else:
            click.echo(
                f"{format_date(entry.date):<11} {TYPE_LABELS[entry.type]:<8} "
                f"{category_name[:20]:<20} {entry.client_name[:20]:<20} "
                f"{entry.description[:28]:<28} {value_str:>18}"
            )

    click.echo("-" * 110)
    click.echo(f"{len(view.entries)} entr{'y' if len(view.entries) == 1 else 'ies'}\n")
    echo_totals(view.totals)


def register_commands(cli):
    """Register ledger command with main CLI."""
    cli.add_command(ledger)
