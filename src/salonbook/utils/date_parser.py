"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "15 Jan 2024", etc.
    - Relative days: "today", "yesterday", "tomorrow"
    - The most recent weekday: "last monday", "last friday", ...

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last ") and date_str[5:] in WEEKDAYS:
        target_day = WEEKDAYS.index(date_str[5:])
        days_ago = (today.weekday() - target_day) % 7 or 7
        return today - timedelta(days=days_ago)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the inclusive date range used for monthly listings.

    The range runs from day 1 to day 31 of the month. relativedelta(day=31)
    clamps day 31 to the month's last day, so the upper bound is a real
    date for every month and matches exactly the same rows.

    Raises:
        ValueError: If year/month is not a calendar month
    """
    start = date(year, month, 1)
    return start, start + relativedelta(day=31)


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Args:
        period: Period string (this-month, this-year, this-week, last-month, last-year, last-week)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return today.replace(day=1), today

    if period == "this-year":
        return today.replace(month=1, day=1), today

    if period == "this-week":
        return today - timedelta(days=today.weekday()), today

    if period == "last-month":
        return month_bounds(*_year_month(today - relativedelta(months=1)))

    if period == "last-year":
        last_year = today.year - 1
        return date(last_year, 1, 1), date(last_year, 12, 31)

    if period == "last-week":
        # Monday to Sunday of the previous week
        start_date = today - timedelta(days=today.weekday() + 7)
        return start_date, start_date + timedelta(days=6)

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: this-month, this-year, "
        "this-week, last-month, last-year, last-week"
    )


def _year_month(day: date) -> tuple[int, int]:
    return day.year, day.month
