"""Aggregations over entry snapshots.

Every function here is pure: it reads the entries it is given, performs no
I/O and never raises for bad data. Callers filter first (see
``superjofi.domain.period``) and pass the result in.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional, Protocol, Sequence

from superjofi.domain.entities import (
    CategoryAmount,
    CategoryKind,
    Entry,
    EntryType,
    MonthBucket,
    Totals,
    ZERO,
    kind_for,
)


UNCATEGORIZED_LABEL = "Uncategorized"


class CategoryResolver(Protocol):
    """Anything that maps a category id to its display name."""

    def resolve(self, kind: CategoryKind, category_id: Optional[str]) -> Optional[str]:
        """Return the category name, or None when unknown."""


def _sums_by_type(entries: Iterable[Entry]) -> dict[EntryType, Decimal]:
    sums: dict[EntryType, Decimal] = {entry_type: ZERO for entry_type in EntryType}
    for entry in entries:
        sums[entry.type] += abs(entry.value)
    return sums


def totals_by_type(entries: Iterable[Entry]) -> Totals:
    """Sum entry values per type.

    Types with no entries sum to zero.
    """
    sums = _sums_by_type(entries)
    return Totals(
        income=sums[EntryType.INCOME],
        expense=sums[EntryType.EXPENSE],
        purchase=sums[EntryType.PURCHASE],
    )


def net_balance(entries: Iterable[Entry]) -> Decimal:
    """Return income minus expense minus purchase. May be negative."""
    return totals_by_type(entries).balance


def category_breakdown(
    entries: Iterable[Entry],
    entry_type: EntryType,
    categories: CategoryResolver,
    fallback_label: str = UNCATEGORIZED_LABEL,
) -> list[CategoryAmount]:
    """Group entries of one type by resolved category name.

    Ids that do not resolve (empty, unknown or deleted) are grouped under
    ``fallback_label``. Grouping is by name, so two categories sharing a
    name are reported as one row.

    Args:
        entries: Entry snapshot, usually already filtered to a period
        entry_type: Type whose entries are grouped
        categories: Chart of accounts used to resolve names
        fallback_label: Name used for unresolved ids

    Returns:
        Rows sorted by value, largest first. Equal values keep the order in
        which their names were first seen.
    """
    kind = kind_for(entry_type)
    sums: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for entry in entries:
        if entry.type != entry_type:
            continue
        name = categories.resolve(kind, entry.category_id) or fallback_label
        sums[name] += abs(entry.value)

    rows = [CategoryAmount(name=name, value=value) for name, value in sums.items()]
    rows.sort(key=lambda row: row.value, reverse=True)
    return rows


def monthly_time_series(entries: Iterable[Entry], year: int) -> list[MonthBucket]:
    """Return twelve per-type buckets, January first, for one year.

    Months without entries are present with zero sums. Undated entries and
    entries from other years are ignored.
    """
    sums: list[dict[EntryType, Decimal]] = [
        {entry_type: ZERO for entry_type in EntryType} for _ in range(12)
    ]
    for entry in entries:
        if entry.date is None or entry.date.year != year:
            continue
        sums[entry.date.month - 1][entry.type] += abs(entry.value)

    return [
        MonthBucket(
            month=month,
            income=bucket[EntryType.INCOME],
            expense=bucket[EntryType.EXPENSE],
            purchase=bucket[EntryType.PURCHASE],
        )
        for month, bucket in enumerate(sums)
    ]


def annual_totals(series: Sequence[MonthBucket]) -> Totals:
    """Sum a monthly series into yearly totals."""
    return Totals(
        income=sum((bucket.income for bucket in series), ZERO),
        expense=sum((bucket.expense for bucket in series), ZERO),
        purchase=sum((bucket.purchase for bucket in series), ZERO),
    )
