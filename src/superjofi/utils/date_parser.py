"""Date parsing utilities."""

from datetime import date, datetime, timedelta
import re
from typing import Optional

from dateutil import parser as date_parser


_CALENDAR_DATE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})")

_RELATIVE_DAYS = {
    "today": 0,
    "hoje": 0,
    "yesterday": -1,
    "ontem": -1,
    "tomorrow": 1,
    "amanhã": 1,
    "amanha": 1,
}


def parse_date(date_str: str) -> date:
    """Parse a user-typed date string into a date object.

    Supports:
    - ISO dates: "2024-01-15"
    - Brazilian dates: "15/01/2024" (day first)
    - Relative dates: "today"/"hoje", "yesterday"/"ontem", "tomorrow"/"amanhã"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    if date_str in _RELATIVE_DAYS:
        return today + timedelta(days=_RELATIVE_DAYS[date_str])

    calendar_date = parse_calendar_date(date_str)
    if calendar_date is not None:
        return calendar_date

    try:
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_calendar_date(raw: object) -> Optional[date]:
    """Read the calendar date of a stored value without timezone conversion.

    Stored dates are written as ``YYYY-MM-DD``, sometimes followed by a time
    or an offset (``2024-03-01T00:00:00-03:00``). Only the written year,
    month and day are used, so an entry never moves to a neighbouring day or
    month because of the reader's timezone.

    Returns:
        The date, or None when the value is missing or not a valid date.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        return None

    match = _CALENDAR_DATE.match(raw)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None
