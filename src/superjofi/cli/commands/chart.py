"""Chart of accounts management commands."""

import click
from superjofi.cli.category_resolution import (
    KIND_TITLES,
    kind_option_type,
    parse_kind,
    resolve_category_or_exit,
)
from superjofi.cli.error_handling import domain_errors
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import CategoryKind


@click.group()
def chart_group():
    """Manage the chart of accounts (categories, banks, payment methods)."""
    pass


@chart_group.command("list")
@click.option("--kind", type=kind_option_type(), help="Only list one kind")
@click.pass_context
def list_chart(ctx, kind: str | None):
    """List chart of accounts items grouped by kind."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    kinds = [parse_kind(kind)] if kind else list(CategoryKind)
    chart = service.chart()

    if not chart.categories:
        click.echo("No categories found. Run 'init-chart' to create the default chart.")
        return

    for i, category_kind in enumerate(kinds):
        if i > 0:
            click.echo()
        click.echo(f"{KIND_TITLES[category_kind]}:")
        items = chart.items(category_kind)
        if not items:
            click.echo("  (none)")
            continue
        for item in items:
            click.echo(f"  {item.name} (ID: {item.id})")


@chart_group.command("add")
@click.argument("kind", type=kind_option_type())
@click.argument("name")
@click.pass_context
def add_item(ctx, kind: str, name: str):
    """Add an item to one list of the chart.

    Examples:
        superjofi chart add expense "Internet"
        superjofi chart add payment-method "Boleto"
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    with domain_errors(ctx):
        category_id = service.create_category(parse_kind(kind), name)
    click.echo(f"Created {kind} '{name.strip()}' (ID: {category_id})")


@chart_group.command("rename")
@click.argument("kind", type=kind_option_type())
@click.argument("reference")
@click.argument("name")
@click.pass_context
def rename_item(ctx, kind: str, reference: str, name: str):
    """Rename an item, given its current name or ID."""
    db = ctx.obj["db"]
    service = CategoryService(db)
    category_kind = parse_kind(kind)

    category_id = resolve_category_or_exit(ctx, service, category_kind, reference)
    with domain_errors(ctx):
        service.rename_category(category_kind, category_id, name)
    click.echo(f"Renamed {kind} {category_id} to '{name.strip()}'")


@chart_group.command("delete")
@click.argument("kind", type=kind_option_type())
@click.argument("reference")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_item(ctx, kind: str, reference: str, yes: bool):
    """Delete an item, given its name or ID.

    Entries that used it are kept and show up as uncategorized.
    """
    db = ctx.obj["db"]
    service = CategoryService(db)
    category_kind = parse_kind(kind)

    category_id = resolve_category_or_exit(ctx, service, category_kind, reference)
    if not yes:
        click.confirm(f"Delete {kind} '{reference}'?", abort=True)

    with domain_errors(ctx):
        service.delete_category(category_kind, category_id)
    click.echo(f"Deleted {kind} {category_id}")


def register_commands(cli):
    """Register chart commands with main CLI."""
    cli.add_command(chart_group, name="chart")
