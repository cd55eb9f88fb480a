"""Date parsing utilities."""

import calendar
from datetime import date, timedelta

from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts "today", "yesterday" and anything dateutil understands
    ("2024-03-01", "1 March 2024", "01/03/2024" read day first).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = (date_str or "").strip().lower()
    if text == "today":
        return date.today()
    if text == "yesterday":
        return date.today() - timedelta(days=1)

    try:
        # ISO strings are unambiguous; everything else follows bank statement order
        dayfirst = not (len(text) >= 10 and text[4] in "-/")
        return date_parser.parse(text, dayfirst=dayfirst).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_bounds(month_str: str) -> tuple[date, date]:
    """Return the first and last day of a month given as 'YYYY-MM'.

    Raises:
        ValueError: If the text is not a valid year and month
    """
    try:
        year_str, month_part = month_str.strip().split("-")
        year, month = int(year_str), int(month_part)
        last_day = calendar.monthrange(year, month)[1]
    except (ValueError, AttributeError, calendar.IllegalMonthError) as e:
        raise ValueError(f"Could not parse month '{month_str}' (expected YYYY-MM): {e}")
    return date(year, month, 1), date(year, month, last_day)
