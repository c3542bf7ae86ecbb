"""Entry management commands."""

import click
from superjofi.cli.category_resolution import resolve_category_or_exit
from superjofi.cli.error_handling import domain_errors, handle_domain_error
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import CategoryKind, EntryDraft, EntryType, kind_for
from superjofi.domain.entry import EntryService
from superjofi.utils.amount_parser import parse_amount
from superjofi.utils.date_parser import parse_date
from superjofi.utils.formatters import format_currency, format_date


ENTRY_TYPE_CHOICE = click.Choice(["income", "expense", "purchase"], case_sensitive=False)


def _parse_date_or_exit(ctx, raw: str):
    try:
        return parse_date(raw)
    except ValueError as e:
        handle_domain_error(ctx, e, "Invalid date format")


def _parse_amount_or_exit(ctx, raw: str):
    try:
        return parse_amount(raw)
    except ValueError as e:
        handle_domain_error(ctx, e, "Invalid amount format")


@click.group()
def entry_group():
    """Manage income, expense and purchase entries."""
    pass


@entry_group.command("add")
@click.option("--date", "entry_date", required=True, help="Entry date (YYYY-MM-DD, DD/MM/YYYY, 'today', 'ontem'...)")
@click.option("--type", "entry_type", type=ENTRY_TYPE_CHOICE, required=True, help="Entry type")
@click.option("--value", required=True, help="Amount (e.g., 1500, 'R$ 1.234,56'); the sign is ignored")
@click.option("--category", help="Category name or ID, from the list matching --type")
@click.option("--payment-method", help="Payment method name or ID")
@click.option("--bank", help="Bank name or ID")
@click.option("--client", default="", help="Client or supplier name")
@click.option("--description", default="", help="Free-text description")
@click.pass_context
def add_entry(
    ctx,
    entry_date: str,
    entry_type: str,
    value: str,
    category: str | None,
    payment_method: str | None,
    bank: str | None,
    client: str,
    description: str,
) -> None:
    """Record a new entry.

    Examples:
        superjofi entry add --date today --type income --value 1500 --category Vendas --payment-method Pix
        superjofi entry add --date 05/03/2024 --type expense --value "R$ 320,00" --category Energia
    """
    db = ctx.obj["db"]
    entry_service = EntryService(db)
    category_service = CategoryService(db)

    parsed_type = EntryType(entry_type.upper())
    draft = EntryDraft(
        date=_parse_date_or_exit(ctx, entry_date),
        type=parsed_type,
        value=_parse_amount_or_exit(ctx, value),
        category_id=resolve_category_or_exit(ctx, category_service, kind_for(parsed_type), category),
        description=description,
        payment_method_id=resolve_category_or_exit(
            ctx, category_service, CategoryKind.PAYMENT_METHOD, payment_method
        ),
        bank_id=resolve_category_or_exit(ctx, category_service, CategoryKind.BANK, bank),
        client_name=client,
    )

    with domain_errors(ctx):
        entry_id = entry_service.add_entry(draft)
    click.echo(f"Created entry {entry_id}")


@entry_group.command("update")
@click.argument("entry_id")
@click.option("--date", "entry_date", help="Entry date")
@click.option("--type", "entry_type", type=ENTRY_TYPE_CHOICE, help="Entry type")
@click.option("--value", help="Amount; the sign is ignored")
@click.option("--category", help="Category name or ID, or empty string to clear")
@click.option("--payment-method", help="Payment method name or ID, or empty string to clear")
@click.option("--bank", help="Bank name or ID, or empty string to clear")
@click.option("--client", help="Client or supplier name")
@click.option("--description", help="Free-text description")
@click.pass_context
def update_entry(
    ctx,
    entry_id: str,
    entry_date: str | None,
    entry_type: str | None,
    value: str | None,
    category: str | None,
    payment_method: str | None,
    bank: str | None,
    client: str | None,
    description: str | None,
) -> None:
    """Update an entry.

    Fields that are not given keep their current values. Changing --type
    without --category clears the category, since categories belong to
    one type.

    Examples:
        superjofi entry update 3 --value 180
        superjofi entry update 3 --type purchase --category Mercadorias
        superjofi entry update 3 --bank ""  # Clear bank
    """
    db = ctx.obj["db"]
    entry_service = EntryService(db)
    category_service = CategoryService(db)

    current = entry_service.get_entry(entry_id)
    if current is None:
        click.echo(f"Error: Entry {entry_id} not found", err=True)
        ctx.exit(1)

    changes = {}
    if entry_date is not None:
        changes["date"] = _parse_date_or_exit(ctx, entry_date)
    if value is not None:
        changes["value"] = _parse_amount_or_exit(ctx, value)
    if client is not None:
        changes["client_name"] = client
    if description is not None:
        changes["description"] = description

    new_type = current.type
    if entry_type is not None:
        new_type = EntryType(entry_type.upper())
        changes["type"] = new_type
        if new_type != current.type and category is None:
            changes["category_id"] = None

    if category is not None:
        changes["category_id"] = resolve_category_or_exit(
            ctx, category_service, kind_for(new_type), category
        )
    if payment_method is not None:
        changes["payment_method_id"] = resolve_category_or_exit(
            ctx, category_service, CategoryKind.PAYMENT_METHOD, payment_method
        )
    if bank is not None:
        changes["bank_id"] = resolve_category_or_exit(
            ctx, category_service, CategoryKind.BANK, bank
        )

    with domain_errors(ctx):
        entry_service.update_entry(entry_id, entry_service.draft_from(current, **changes))
    click.echo(f"Updated entry {entry_id}")


@entry_group.command("show")
@click.argument("entry_id")
@click.pass_context
def show_entry(ctx, entry_id: str) -> None:
    """Show every field of an entry."""
    db = ctx.obj["db"]
    entry_service = EntryService(db)
    chart = CategoryService(db).chart()

    entry = entry_service.get_entry(entry_id)
    if entry is None:
        click.echo(f"Error: Entry {entry_id} not found", err=True)
        ctx.exit(1)

    def name_or_na(kind, reference):
        return chart.resolve(kind, reference) or "N/A"

    click.echo(f"Entry ID: {entry.id}")
    click.echo(f"  Date: {format_date(entry.date) or 'N/A'}")
    click.echo(f"  Type: {entry.type.value}")
    click.echo(f"  Value: {format_currency(entry.value)}")
    click.echo(f"  Category: {name_or_na(kind_for(entry.type), entry.category_id)}")
    click.echo(f"  Payment method: {name_or_na(CategoryKind.PAYMENT_METHOD, entry.payment_method_id)}")
    click.echo(f"  Bank: {name_or_na(CategoryKind.BANK, entry.bank_id)}")
    if entry.client_name:
        click.echo(f"  Client: {entry.client_name}")
    if entry.description:
        click.echo(f"  Description: {entry.description}")


@entry_group.command("delete")
@click.argument("entry_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: str, yes: bool) -> None:
    """Delete an entry.

    Examples:
        superjofi entry delete 1
    """
    db = ctx.obj["db"]
    entry_service = EntryService(db)

    if entry_service.get_entry(entry_id) is None:
        click.echo(f"Error: Entry {entry_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete entry {entry_id}?"):
        click.echo("Deletion cancelled.")
        return

    with domain_errors(ctx):
        entry_service.delete_entry(entry_id)
    click.echo(f"Deleted entry {entry_id}")


def register_commands(cli: click.Group) -> None:
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
