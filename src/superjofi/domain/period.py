"""Period filtering for the ledger and reports."""

from datetime import date
from typing import Iterable

from superjofi.domain.entities import Entry, Period


def matches_search(entry: Entry, search_term: str) -> bool:
    """Return True when description or client name contains the term.

    The match is a case-insensitive substring test; an empty term matches
    every entry.
    """
    if not search_term:
        return True
    needle = search_term.casefold()
    return (
        needle in (entry.description or "").casefold()
        or needle in (entry.client_name or "").casefold()
    )


def filter_entries(
    entries: Iterable[Entry],
    month: int,
    year: int,
    search_term: str = "",
) -> tuple[Entry, ...]:
    """Select the entries of one month, optionally narrowed by a search term.

    Args:
        entries: Entry snapshot
        month: Zero-based month (0 = January)
        year: Calendar year
        search_term: Optional text looked up in description and client name

    Returns:
        Matching entries in their original order. Entries without a valid
        date are never included.
    """
    return tuple(
        entry
        for entry in entries
        if entry.date is not None
        and entry.date.year == year
        and entry.date.month - 1 == month
        and matches_search(entry, search_term)
    )


def filter_period(
    entries: Iterable[Entry], period: Period, search_term: str = ""
) -> tuple[Entry, ...]:
    """Same as filter_entries, taking a Period cursor."""
    return filter_entries(entries, period.month, period.year, search_term)


def filter_year(entries: Iterable[Entry], year: int) -> tuple[Entry, ...]:
    """Select the dated entries of one calendar year."""
    return tuple(
        entry for entry in entries if entry.date is not None and entry.date.year == year
    )


def sort_for_ledger(entries: Iterable[Entry]) -> tuple[Entry, ...]:
    """Order entries newest first; undated entries go last.

    Entries sharing a date keep their relative order.
    """
    snapshot = list(entries)
    dated = [entry for entry in snapshot if entry.date is not None]
    undated = [entry for entry in snapshot if entry.date is None]
    # list.sort stays stable with reverse=True
    dated.sort(key=lambda entry: entry.date or date.min, reverse=True)
    return tuple(dated + undated)
