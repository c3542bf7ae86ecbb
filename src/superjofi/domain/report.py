"""Ledger and report assembly domain service."""

from datetime import date
from typing import Optional

from superjofi.domain.aggregation import (
    annual_totals,
    category_breakdown,
    monthly_time_series,
    totals_by_type,
)
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import AnnualReport, EntryType, LedgerView, Period
from superjofi.domain.entry import EntryService
from superjofi.domain.errors import ValidationError, invalid_month
from superjofi.domain.period import filter_period, filter_year, sort_for_ledger


class ReportService:
    """Service for building the ledger and annual report views.

    Each call takes one snapshot of entries (and of the chart of accounts
    where names are needed) and computes everything from it.
    """

    def __init__(self, entry_service: EntryService, category_service: CategoryService):
        """Initialize report service.

        Args:
            entry_service: Source of entry snapshots
            category_service: Source of category names
        """
        self.entry_service = entry_service
        self.category_service = category_service

    def ledger(self, period: Period, search_term: str = "") -> LedgerView:
        """Build the ledger for a period.

        Args:
            period: Month being viewed
            search_term: Optional text matched against description and client name

        Returns:
            LedgerView with entries newest first and their totals
        """
        entries = filter_period(self.entry_service.list_entries(), period, search_term)
        return LedgerView(
            period=period,
            search_term=search_term,
            entries=sort_for_ledger(entries),
            totals=totals_by_type(entries),
        )

    def annual_report(
        self,
        year: int,
        month: Optional[int] = None,
        today: Optional[date] = None,
    ) -> AnnualReport:
        """Build the yearly report.

        Args:
            year: Calendar year of the monthly series
            month: Zero-based month highlighted by the report. Defaults to
                the current month.
            today: Reference date for the default month

        Returns:
            AnnualReport with the 12-month series, yearly totals, and the
            totals and breakdowns of the highlighted month
        """
        if month is None:
            month = Period.current(today).month
        if not 0 <= month <= 11:
            raise ValidationError(invalid_month(month))

        entries = filter_year(self.entry_service.list_entries(), year)
        chart = self.category_service.chart()

        series = monthly_time_series(entries, year)
        focus_entries = filter_period(entries, Period(month=month, year=year))

        return AnnualReport(
            year=year,
            series=tuple(series),
            annual_totals=annual_totals(series),
            focus_month=month,
            focus_totals=series[month].totals,
            expense_breakdown=tuple(
                category_breakdown(focus_entries, EntryType.EXPENSE, chart)
            ),
            purchase_breakdown=tuple(
                category_breakdown(focus_entries, EntryType.PURCHASE, chart)
            ),
            income_breakdown=tuple(
                category_breakdown(focus_entries, EntryType.INCOME, chart)
            ),
        )
