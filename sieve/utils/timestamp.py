"""Date formatting utilities."""

import re
from datetime import date, datetime
from typing import Optional

ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def parse_iso_date(value) -> Optional[date]:
    """
    Coerce a content item's date field to a calendar date.

    Accepts date and datetime objects as well as strings beginning with an
    ISO ``YYYY-MM-DD`` date (a trailing time component is ignored).

    Args:
        value: Raw date field from a content item

    Returns:
        date, or None if the value is missing or not a valid calendar date

    Examples:
        parse_iso_date("2025-10-16")           # date(2025, 10, 16)
        parse_iso_date("2025-10-16T09:30:00")  # date(2025, 10, 16)
        parse_iso_date("2025-02-30")           # None
        parse_iso_date(None)                   # None
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    match = ISO_DATE_PATTERN.match(value.strip())
    if not match:
        return None

    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError:
        return None


def format_long_date(value: date) -> str:
    """
    Format a date as a lowercase long-form string.

    The day is zero-padded so the form is independent of the host locale.

    Examples:
        format_long_date(date(2025, 10, 16))  # "october 16, 2025"
        format_long_date(date(2025, 9, 1))    # "september 01, 2025"
    """
    return f"{MONTH_NAMES[value.month - 1]} {value.day:02d}, {value.year:04d}"


def now_stamp() -> str:
    """Current local time as a filesystem-safe stamp, e.g. "20251016_093000"."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
