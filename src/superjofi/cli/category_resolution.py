"""CLI helpers for chart-of-accounts arguments."""

from __future__ import annotations

from typing import Optional

import click

from superjofi.cli.error_handling import handle_domain_error
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import CategoryKind
from superjofi.domain.errors import DomainError


# CLI spelling of each kind
KIND_CHOICES = {
    "income": CategoryKind.INCOME,
    "expense": CategoryKind.EXPENSE,
    "purchase": CategoryKind.PURCHASE,
    "bank": CategoryKind.BANK,
    "payment-method": CategoryKind.PAYMENT_METHOD,
}

KIND_TITLES = {
    CategoryKind.INCOME: "Receitas",
    CategoryKind.EXPENSE: "Despesas",
    CategoryKind.PURCHASE: "Compras",
    CategoryKind.BANK: "Bancos",
    CategoryKind.PAYMENT_METHOD: "Formas de pagamento",
}


def kind_option_type() -> click.Choice:
    """Return the click choice used for kind arguments."""
    return click.Choice(list(KIND_CHOICES), case_sensitive=False)


def parse_kind(value: str) -> CategoryKind:
    return KIND_CHOICES[value.lower()]


def resolve_category_or_exit(
    ctx: click.Context,
    category_service: CategoryService,
    kind: CategoryKind,
    reference: Optional[str],
) -> Optional[str]:
    """Resolve a category name or ID to an ID, or exit with a CLI error.

    None and empty references resolve to None.
    """
    if not reference:
        return None
    try:
        return category_service.find_category(kind, reference).id
    except DomainError as e:
        handle_domain_error(ctx, e)
