"""Tests for date parsing and date ranges."""

from datetime import date, timedelta

import pytest
from dateutil.relativedelta import relativedelta

from salonbook.utils.date_parser import get_date_range, month_bounds, parse_date


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_relative_days():
    today = date.today()
    assert parse_date("today") == today
    assert parse_date(" Yesterday ") == today - timedelta(days=1)
    assert parse_date("tomorrow") == today + timedelta(days=1)


def test_parse_last_weekday():
    """'last friday' is the most recent Friday strictly before today."""
    result = parse_date("last friday")

    assert result.weekday() == 4
    assert 1 <= (date.today() - result).days <= 7


def test_parse_standard_formats():
    assert parse_date("January 15, 2024") == date(2024, 1, 15)
    assert parse_date("15/01/2024") == date(2024, 1, 15)


def test_parse_invalid():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "year, month, last_day",
    [(2024, 2, 29), (2023, 2, 28), (2024, 4, 30), (2024, 12, 31)],
)
def test_month_bounds_clamps_day_31(year, month, last_day):
    start, end = month_bounds(year, month)

    assert start == date(year, month, 1)
    assert end == date(year, month, last_day)


def test_month_bounds_invalid_month():
    with pytest.raises(ValueError):
        month_bounds(2024, 13)


def test_get_date_range_this_month():
    today = date.today()
    assert get_date_range("this-month") == (today.replace(day=1), today)


def test_get_date_range_this_week():
    start, end = get_date_range("this-week")

    assert start.weekday() == 0
    assert end == date.today()


def test_get_date_range_last_month():
    today = date.today()
    start, end = get_date_range("last-month")

    assert start == (today - relativedelta(months=1)).replace(day=1)
    assert end == today.replace(day=1) - timedelta(days=1)


def test_get_date_range_last_year():
    last_year = date.today().year - 1
    assert get_date_range("last-year") == (date(last_year, 1, 1), date(last_year, 12, 31))


def test_get_date_range_last_week():
    start, end = get_date_range("last-week")

    assert start.weekday() == 0
    assert end.weekday() == 6
    assert (end - start).days == 6
    assert end < date.today()


def test_get_date_range_invalid_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("invalid-period")
