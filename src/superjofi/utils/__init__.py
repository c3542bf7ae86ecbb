"""Utility functions for superjofi."""

from superjofi.utils.date_parser import parse_date, parse_calendar_date
from superjofi.utils.amount_parser import parse_amount
from superjofi.utils.formatters import format_currency, format_date, month_name

__all__ = [
    "parse_date",
    "parse_calendar_date",
    "parse_amount",
    "format_currency",
    "format_date",
    "month_name",
]
