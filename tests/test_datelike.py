"""Tests for the calendar helpers and fallible field setters."""

from datetime import date, datetime, timezone

import pytest

from datestep.datelike import (
    is_leap_year,
    last_day_of_month,
    last_day_of_month_0,
    with_day,
    with_month,
    with_year,
    with_ymd,
)


@pytest.mark.parametrize("year", [2000, 1996, 2004, 2400, -4])
def test_is_leap_year_true(year):
    """Years divisible by 4, except centuries not divisible by 400."""
    assert is_leap_year(year)


@pytest.mark.parametrize("year", [1900, 1997, 2001, 2100, 1])
def test_is_leap_year_false(year):
    """Common years, including non-400 centuries."""
    assert not is_leap_year(year)


def test_last_day_of_february():
    """February depends on the year."""
    assert last_day_of_month(2000, 2) == 29
    assert last_day_of_month(1997, 2) == 28
    assert last_day_of_month(1900, 2) == 28


@pytest.mark.parametrize("month", [1, 3, 5, 7, 8, 10, 12])
def test_last_day_of_long_months(month):
    """Thirty-one day months."""
    assert last_day_of_month(1997, month) == 31


@pytest.mark.parametrize("month", [4, 6, 9, 11])
def test_last_day_of_short_months(month):
    """Thirty day months."""
    assert last_day_of_month(1997, month) == 30


def test_last_day_of_month_zero_based():
    """Zero-based lookup is shifted by one."""
    assert last_day_of_month_0(2000, 1) == 29
    assert last_day_of_month_0(1997, 0) == 31
    assert last_day_of_month_0(1997, 11) == 31


def test_last_day_of_month_outside_date_range():
    """Years the date type cannot hold still have month lengths."""
    assert last_day_of_month(300_000, 2) == 29
    assert last_day_of_month(-1, 2) == 28


def test_last_day_of_month_rejects_bad_month():
    """Months outside the calendar are a programmer error."""
    with pytest.raises(ValueError, match="month must be in range"):
        last_day_of_month(2000, 13)

    with pytest.raises(ValueError, match="month0 must be in range"):
        last_day_of_month_0(2000, 12)


def test_field_setters_return_none_for_invalid_dates():
    """Setters map the date type's ValueError to None."""
    leap_day = date(2024, 2, 29)

    assert with_year(leap_day, 2028) == date(2028, 2, 29)
    assert with_year(leap_day, 2023) is None
    assert with_year(leap_day, 10_000) is None

    assert with_month(date(2024, 1, 31), 4) is None
    assert with_month(date(2024, 1, 30), 4) == date(2024, 4, 30)

    assert with_day(date(2024, 4, 1), 31) is None
    assert with_day(date(2024, 4, 1), 30) == date(2024, 4, 30)


def test_with_ymd_never_passes_through_invalid_state():
    """Moving Jan 31 to Apr 30 works even though Apr 31 does not exist."""
    assert with_ymd(date(2024, 1, 31), 2024, 4, 30) == date(2024, 4, 30)
    assert with_ymd(date(2024, 1, 31), 2023, 2, 29) is None


def test_with_ymd_keeps_time_and_zone():
    """Only the date fields change on a datetime."""
    dt = datetime(2024, 1, 31, 16, 39, 57, 123000, tzinfo=timezone.utc)

    moved = with_ymd(dt, 2025, 6, 15)

    assert moved == datetime(2025, 6, 15, 16, 39, 57, 123000, tzinfo=timezone.utc)
