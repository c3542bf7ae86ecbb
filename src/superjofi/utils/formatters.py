"""Display formatting for Brazilian Portuguese output."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


MONTH_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)


def month_name(month: int) -> str:
    """Return the Portuguese name of a zero-based month index."""
    return MONTH_NAMES[month]


def format_currency(value: Decimal | int | float) -> str:
    """Format an amount as Brazilian reais.

    Examples:
        Decimal("1234.5") -> "R$ 1.234,50"
        Decimal("-80") -> "-R$ 80,00"
    """
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    # Swap the US separators produced by the format spec for pt-BR ones
    digits = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {digits}"


def format_signed_currency(value: Decimal, is_income: bool) -> str:
    """Format an entry value with a leading '+' for income and '-' otherwise."""
    return f"{'+' if is_income else '-'} {format_currency(value)}"


def format_date(day: Optional[date]) -> str:
    """Format a date as dd/mm/yyyy, or an empty string when missing."""
    if day is None:
        return ""
    return day.strftime("%d/%m/%Y")
