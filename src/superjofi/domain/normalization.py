"""Normalization of backend rows into canonical entries.

Rows written by older versions of the application carry type tags such as
"RECCEITA" or "DESPESA" and sometimes signed values. Everything is decided
here, once; the rest of the package only sees ``Entry`` objects.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from superjofi.domain.entities import Entry, EntryType, ZERO, canonical_id
from superjofi.utils.date_parser import parse_calendar_date
from superjofi.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_entry_type(tag: Any) -> EntryType:
    """Map a stored type tag to an EntryType.

    Canonical names map directly. Otherwise tags starting with "REC" are
    income, tags starting with "COMP" are purchases, and anything else is
    an expense.
    """
    if isinstance(tag, EntryType):
        return tag
    normalized = str(tag or "").strip().upper()
    try:
        return EntryType(normalized)
    except ValueError:
        pass
    if normalized.startswith("REC"):
        return EntryType.INCOME
    if normalized.startswith("COMP"):
        return EntryType.PURCHASE
    return EntryType.EXPENSE


def normalize_value(raw: Any) -> Decimal:
    """Return the magnitude of a stored value.

    Non-numeric values become zero so a bad row never breaks a total.
    """
    if raw is None or raw == "":
        return ZERO
    try:
        value = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    except (InvalidOperation, ValueError):
        logger.warning(f"Non-numeric entry value {raw!r} read as zero")
        return ZERO
    if not value.is_finite():
        logger.warning(f"Non-finite entry value {raw!r} read as zero")
        return ZERO
    return abs(value)


def normalize_reference(raw: Any) -> Optional[str]:
    """Return a category/bank/payment-method id, or None when empty."""
    return canonical_id(raw)


def normalize_text(raw: Any) -> str:
    """Return free text, with None read as an empty string."""
    if raw is None:
        return ""
    return str(raw)


def row_to_entry(row: Mapping[str, Any]) -> Entry:
    """Build an Entry from a raw backend row.

    Accepts both snake_case keys and the camelCase keys used by the web
    client (``categoryId``, ``clientName``...). A missing ``bank_id`` is
    read as None.
    """

    def pick(*keys: str) -> Any:
        for key in keys:
            if key in row:
                return row[key]
        return None

    entry_id = normalize_reference(pick("id"))
    raw_date = pick("date")
    entry_date = parse_calendar_date(raw_date)
    if entry_date is None:
        logger.warning(
            f"Entry {entry_id} has an unreadable date {raw_date!r}; "
            "it will be left out of period views"
        )

    return Entry(
        id=entry_id or "",
        date=entry_date,
        type=normalize_entry_type(pick("type")),
        value=normalize_value(pick("value")),
        category_id=normalize_reference(pick("category_id", "categoryId")),
        description=normalize_text(pick("description")),
        payment_method_id=normalize_reference(
            pick("payment_method_id", "paymentMethodId")
        ),
        bank_id=normalize_reference(pick("bank_id", "bankId")),
        client_name=normalize_text(pick("client_name", "clientName")),
        created_at=pick("created_at"),
    )
