"""Initialize the default chart of accounts."""

import click
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import CategoryKind
from superjofi.domain.errors import DomainError


# Default chart for a small retail business
DEFAULT_CHART = [
    (CategoryKind.INCOME, "Vendas"),
    (CategoryKind.INCOME, "Recebimentos"),
    (CategoryKind.INCOME, "Outros"),
    (CategoryKind.EXPENSE, "Energia"),
    (CategoryKind.EXPENSE, "Aluguel"),
    (CategoryKind.EXPENSE, "RH"),
    (CategoryKind.EXPENSE, "Contabilidade"),
    (CategoryKind.PURCHASE, "Mercadorias"),
    (CategoryKind.PURCHASE, "Insumos"),
    (CategoryKind.BANK, "Stone"),
    (CategoryKind.BANK, "Bradesco"),
    (CategoryKind.BANK, "Conta Interna"),
    (CategoryKind.PAYMENT_METHOD, "Dinheiro"),
    (CategoryKind.PAYMENT_METHOD, "Pix"),
    (CategoryKind.PAYMENT_METHOD, "Débito"),
    (CategoryKind.PAYMENT_METHOD, "Crédito"),
]


def seed_chart(service: CategoryService) -> tuple[int, int]:
    """Create every default item.

    Returns:
        Tuple of (created, errors)
    """
    created = 0
    errors = 0
    for kind, name in DEFAULT_CHART:
        try:
            service.create_category(kind, name)
            created += 1
        except DomainError as e:
            click.echo(f"Warning: Could not create {kind.value} '{name}': {e}", err=True)
            errors += 1
    return created, errors


@click.command("init-chart")
@click.option("--force", is_flag=True, help="Replace the existing chart")
@click.pass_context
def init_chart(ctx, force: bool):
    """Initialize database with the default chart of accounts."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    existing = service.list_categories()
    if existing and not force:
        click.echo("Chart of accounts already exists. Use --force to overwrite.")
        return

    for category in existing:
        service.delete_category(category.kind, category.id)

    click.echo("Creating default chart of accounts...")
    created, errors = seed_chart(service)

    if errors == 0:
        click.echo(f"Successfully created {created} items.")
    else:
        click.echo(f"Created {created} items with {errors} errors.")


def register_commands(cli):
    """Register init-chart command with main CLI."""
    cli.add_command(init_chart)
