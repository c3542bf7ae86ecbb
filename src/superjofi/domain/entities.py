"""Domain model entities for superjofi.

These are pure data classes representing business concepts, independent of
the database schema. Rows coming from the backend are normalized into these
shapes once, at the mapper layer, and are never re-interpreted downstream.
"""

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from superjofi.domain.errors import ValidationError, invalid_month
from superjofi.utils.formatters import month_name


ZERO = Decimal("0")


class EntryType(str, Enum):
    """Direction of a financial entry."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    PURCHASE = "PURCHASE"


class CategoryKind(str, Enum):
    """Lists that make up the chart of accounts."""

    INCOME = "income"
    EXPENSE = "expense"
    PURCHASE = "purchase"
    BANK = "bank"
    PAYMENT_METHOD = "payment_method"


ENTRY_TYPE_KINDS: dict[EntryType, CategoryKind] = {
    EntryType.INCOME: CategoryKind.INCOME,
    EntryType.EXPENSE: CategoryKind.EXPENSE,
    EntryType.PURCHASE: CategoryKind.PURCHASE,
}


def kind_for(entry_type: EntryType) -> CategoryKind:
    """Return the category kind that classifies entries of a type."""
    return ENTRY_TYPE_KINDS[entry_type]


def canonical_id(value) -> Optional[str]:
    """Return the canonical text of an id, or None when empty.

    Numeric ids lose their leading zeros so "01" and "1" name the same row.
    """
    if value is None:
        return None
    text = str(value).strip()
    if text.isascii() and text.isdecimal():
        return str(int(text))
    return text or None


@dataclass(frozen=True)
class Category:
    """Chart of accounts item."""

    id: str
    name: str
    kind: CategoryKind
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Entry:
    """Financial entry domain entity.

    ``value`` is always a non-negative magnitude; the direction comes from
    ``type``. ``date`` is None when the stored date could not be parsed.
    """

    id: str
    date: Optional[date]
    type: EntryType
    value: Decimal
    category_id: Optional[str] = None
    description: str = ""
    payment_method_id: Optional[str] = None
    bank_id: Optional[str] = None
    client_name: str = ""
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class EntryDraft:
    """Non-id fields of an entry, as submitted by an editor."""

    date: date
    type: EntryType
    value: Decimal
    category_id: Optional[str] = None
    description: str = ""
    payment_method_id: Optional[str] = None
    bank_id: Optional[str] = None
    client_name: str = ""


@dataclass(frozen=True)
class ChartOfAccounts:
    """Immutable snapshot of every category list."""

    categories: tuple[Category, ...] = ()

    def items(self, kind: CategoryKind) -> tuple[Category, ...]:
        """Return the categories of one kind in registry order."""
        return tuple(cat for cat in self.categories if cat.kind == kind)

    def resolve(self, kind: CategoryKind, category_id: Optional[str]) -> Optional[str]:
        """Return the name for a category id within a kind, if it exists."""
        wanted = canonical_id(category_id)
        if wanted is None:
            return None
        for cat in self.categories:
            if cat.kind == kind and cat.id == wanted:
                return cat.name
        return None


@dataclass(frozen=True)
class Totals:
    """Sums of entry values per type."""

    income: Decimal = ZERO
    expense: Decimal = ZERO
    purchase: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        """Income minus expense minus purchase."""
        return self.income - self.expense - self.purchase

    @property
    def is_negative(self) -> bool:
        """Whether the balance is below zero."""
        return self.balance < 0


@dataclass(frozen=True)
class CategoryAmount:
    """One row of a category breakdown."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class MonthBucket:
    """Per-type sums for one month of a year."""

    month: int
    income: Decimal = ZERO
    expense: Decimal = ZERO
    purchase: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        """Income minus expense minus purchase for the month."""
        return self.income - self.expense - self.purchase

    @property
    def totals(self) -> Totals:
        """The month as a Totals value."""
        return Totals(income=self.income, expense=self.expense, purchase=self.purchase)


@dataclass(frozen=True)
class Period:
    """A (month, year) cursor used to scope the ledger and reports.

    ``month`` is zero-based: 0 is January and 11 is December.
    """

    month: int
    year: int

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise ValidationError(invalid_month(self.month))

    @classmethod
    def current(cls, today: Optional[date] = None) -> "Period":
        """Return the period containing today (or the given date)."""
        today = today or date.today()
        return cls(month=today.month - 1, year=today.year)

    def previous(self) -> "Period":
        if self.month == 0:
            return Period(month=11, year=self.year - 1)
        return Period(month=self.month - 1, year=self.year)

    def next(self) -> "Period":
        if self.month == 11:
            return Period(month=0, year=self.year + 1)
        return Period(month=self.month + 1, year=self.year)

    def contains(self, day: Optional[date]) -> bool:
        """Return True when a calendar date falls in this period."""
        if day is None:
            return False
        return day.year == self.year and day.month - 1 == self.month

    @property
    def first_day(self) -> date:
        return date(self.year, self.month + 1, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month + 1, monthrange(self.year, self.month + 1)[1])

    @property
    def label(self) -> str:
        """Human label, e.g. 'Março 2024'."""
        return f"{month_name(self.month)} {self.year}"


@dataclass(frozen=True)
class LedgerView:
    """Entries of one period as shown in the ledger, with their totals."""

    period: Period
    search_term: str
    entries: tuple[Entry, ...]
    totals: Totals


@dataclass(frozen=True)
class AnnualReport:
    """Figures behind the reports screen for one year."""

    year: int
    series: tuple[MonthBucket, ...]
    annual_totals: Totals
    focus_month: int
    focus_totals: Totals
    expense_breakdown: tuple[CategoryAmount, ...] = field(default_factory=tuple)
    purchase_breakdown: tuple[CategoryAmount, ...] = field(default_factory=tuple)
    income_breakdown: tuple[CategoryAmount, ...] = field(default_factory=tuple)


