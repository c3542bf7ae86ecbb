"""Tests for period filtering and month navigation."""

from datetime import date
from decimal import Decimal

import pytest

from superjofi.domain.entities import EntryType, Period
from superjofi.domain.errors import ValidationError
from superjofi.domain.normalization import row_to_entry
from superjofi.domain.period import (
    filter_entries,
    filter_period,
    filter_year,
    matches_search,
    sort_for_ledger,
)


@pytest.fixture
def mixed_entries(make_entry):
    return [
        make_entry("2024-02-29", EntryType.INCOME, "10", description="Leap day"),
        make_entry("2024-03-01", EntryType.INCOME, "100", description="Venda balcão", client_name="Maria"),
        make_entry("2024-03-31", EntryType.EXPENSE, "50", description="Energia março"),
        make_entry("2023-03-15", EntryType.EXPENSE, "70", description="Last year"),
        make_entry("2024-04-01", EntryType.PURCHASE, "30", description="Next month"),
        make_entry(None, EntryType.EXPENSE, "999", description="No date"),
    ]


class TestFilterEntries:
    """Tests for filter_entries."""

    def test_returns_only_target_month_and_year(self, mixed_entries):
        result = filter_entries(mixed_entries, month=2, year=2024)

        assert [e.description for e in result] == ["Venda balcão", "Energia março"]
        for entry in result:
            assert entry.date.month - 1 == 2
            assert entry.date.year == 2024

    def test_excluded_entries_do_not_belong_to_period(self, mixed_entries):
        result = filter_entries(mixed_entries, month=2, year=2024)

        for entry in mixed_entries:
            if entry in result:
                continue
            assert entry.date is None or (entry.date.month - 1, entry.date.year) != (2, 2024)

    def test_undated_entries_are_excluded(self, mixed_entries):
        for month in range(12):
            result = filter_entries(mixed_entries, month=month, year=2024)
            assert all(entry.date is not None for entry in result)

    def test_empty_input(self):
        assert filter_entries([], month=0, year=2024) == ()

    def test_accepts_generator(self, mixed_entries):
        result = filter_entries((e for e in mixed_entries), month=1, year=2024)
        assert [e.description for e in result] == ["Leap day"]

    def test_search_matches_description_case_insensitive(self, mixed_entries):
        result = filter_entries(mixed_entries, month=2, year=2024, search_term="ENERGIA")
        assert [e.description for e in result] == ["Energia março"]

    def test_search_matches_client_name(self, mixed_entries):
        result = filter_entries(mixed_entries, month=2, year=2024, search_term="mari")
        assert [e.client_name for e in result] == ["Maria"]

    def test_search_results_all_match_term(self, mixed_entries):
        term = "a"
        result = filter_entries(mixed_entries, month=2, year=2024, search_term=term)
        assert result
        for entry in result:
            assert matches_search(entry, term)

    def test_search_without_match_returns_empty(self, mixed_entries):
        assert filter_entries(mixed_entries, month=2, year=2024, search_term="zzz") == ()

    def test_does_not_modify_input(self, mixed_entries):
        snapshot = list(mixed_entries)
        filter_entries(mixed_entries, month=2, year=2024, search_term="venda")
        assert mixed_entries == snapshot

    def test_filter_period_uses_cursor(self, mixed_entries):
        period = Period(month=2, year=2024)
        assert filter_period(mixed_entries, period) == filter_entries(mixed_entries, 2, 2024)

    def test_filter_year(self, mixed_entries):
        result = filter_year(mixed_entries, 2024)
        assert len(result) == 4
        assert all(entry.date.year == 2024 for entry in result)


class TestStoredDatesAcrossTimezones:
    """Stored dates keep their written calendar day."""

    @pytest.mark.parametrize(
        "stored",
        [
            "2024-03-01",
            "2024-03-01T00:00:00",
            "2024-03-01T00:00:00-03:00",
            "2024-03-01T23:30:00+14:00",
            "2024-03-01T00:00:00.000Z",
        ],
    )
    def test_first_of_month_stays_in_month(self, stored):
        entry = row_to_entry({"id": 1, "date": stored, "type": "INCOME", "value": "10"})

        assert entry.date == date(2024, 3, 1)
        assert filter_entries([entry], month=2, year=2024) == (entry,)
        assert filter_entries([entry], month=1, year=2024) == ()

    def test_last_day_of_year_stays_in_year(self):
        entry = row_to_entry({"id": 1, "date": "2023-12-31T21:00:00-03:00", "type": "EXPENSE", "value": "5"})

        assert filter_entries([entry], month=11, year=2023) == (entry,)
        assert filter_entries([entry], month=0, year=2024) == ()

    @pytest.mark.parametrize("stored", ["", "not a date", "2024-02-30", "31/12/2024", None])
    def test_unparseable_dates_are_excluded(self, stored):
        entry = row_to_entry({"id": 1, "date": stored, "type": "EXPENSE", "value": "5"})

        assert entry.date is None
        for month in range(12):
            assert filter_entries([entry], month=month, year=2024) == ()


class TestPeriodNavigation:
    """Tests for the month cursor."""

    def test_previous_from_january_wraps_to_december(self):
        assert Period(month=0, year=2024).previous() == Period(month=11, year=2023)

    def test_next_from_december_wraps_to_january(self):
        assert Period(month=11, year=2024).next() == Period(month=0, year=2025)

    def test_steps_within_year(self):
        period = Period(month=5, year=2024)
        assert period.previous() == Period(month=4, year=2024)
        assert period.next() == Period(month=6, year=2024)

    def test_round_trip_over_full_year(self):
        start = Period(month=7, year=2024)
        period = start
        for _ in range(12):
            period = period.next()
        assert period == Period(month=7, year=2025)
        for _ in range(12):
            period = period.previous()
        assert period == start

    @pytest.mark.parametrize("month", [-1, 12, 99])
    def test_invalid_month_rejected(self, month):
        with pytest.raises(ValidationError):
            Period(month=month, year=2024)

    def test_current_uses_zero_based_month(self):
        assert Period.current(date(2024, 1, 20)) == Period(month=0, year=2024)
        assert Period.current(date(2024, 12, 1)) == Period(month=11, year=2024)

    def test_bounds_and_label(self):
        period = Period(month=1, year=2024)
        assert period.first_day == date(2024, 2, 1)
        assert period.last_day == date(2024, 2, 29)
        assert period.label == "Fevereiro 2024"
        assert period.contains(date(2024, 2, 15))
        assert not period.contains(date(2023, 2, 15))
        assert not period.contains(None)


class TestSortForLedger:
    """Tests for ledger ordering."""

    def test_newest_first_with_undated_last(self, mixed_entries):
        result = sort_for_ledger(mixed_entries)

        dates = [entry.date for entry in result]
        assert dates[-1] is None
        dated = dates[:-1]
        assert dated == sorted(dated, reverse=True)

    def test_same_date_keeps_original_order(self, make_entry):
        first = make_entry("2024-03-05", value="1", description="first")
        second = make_entry("2024-03-05", value="2", description="second")
        older = make_entry("2024-03-01", value="3", description="older")

        result = sort_for_ledger([first, older, second])

        assert [e.description for e in result] == ["first", "second", "older"]

    def test_values_untouched(self, make_entry):
        entry = make_entry("2024-03-05", EntryType.EXPENSE, "12.34")
        assert sort_for_ledger([entry])[0].value == Decimal("12.34")
