"""Tests for module configuration and duration shorthands."""

from datetime import date, timedelta

import pytest
from dateutil.relativedelta import relativedelta

from datestep import (
    DayDuration,
    DeltaDuration,
    InvalidDateHandling,
    MonthDuration,
    YearDuration,
    configure_datestep,
    days,
    delta,
    get_datestep_config,
    hours,
    minutes,
    months,
    reset_datestep_config,
    seconds,
    weeks,
    years,
)


def test_default_handling_is_reject():
    """Without configuration, months() rejects impossible days."""
    config = get_datestep_config()

    assert config.default_invalid_date_handling is InvalidDateHandling.REJECT
    assert months(1) == MonthDuration(1, InvalidDateHandling.REJECT)
    assert months(1).add_to(date(2023, 1, 31)) is None


def test_configure_default_handling():
    """The configured policy applies to months() without a handling."""
    configure_datestep(default_invalid_date_handling=InvalidDateHandling.PREVIOUS)

    assert months(1).add_to(date(2023, 1, 31)) == date(2023, 2, 28)


def test_configure_accepts_enum_values():
    """Policies can be given by their string value."""
    configure_datestep(default_invalid_date_handling="next")

    assert months(1) == MonthDuration(1, InvalidDateHandling.NEXT)


def test_configure_rejects_unknown_policy():
    """Unknown policy names raise ValueError."""
    with pytest.raises(ValueError):
        configure_datestep(default_invalid_date_handling="nearest")


def test_configure_none_leaves_setting_unchanged():
    """Omitted settings keep their current value."""
    configure_datestep(default_invalid_date_handling="previous")
    configure_datestep()

    handling = get_datestep_config().default_invalid_date_handling
    assert handling is InvalidDateHandling.PREVIOUS


def test_reset_restores_defaults():
    """Reset brings back the REJECT default."""
    configure_datestep(default_invalid_date_handling="previous")
    reset_datestep_config()

    assert months(1) == MonthDuration(1, InvalidDateHandling.REJECT)


def test_explicit_handling_overrides_config():
    """An explicit handling wins over the configured default."""
    configure_datestep(default_invalid_date_handling="previous")

    assert months(2, "reject") == MonthDuration(2, InvalidDateHandling.REJECT)
    assert months(2, InvalidDateHandling.NEXT).handling is InvalidDateHandling.NEXT


def test_shorthands_build_durations():
    """Each shorthand builds the matching duration value."""
    assert days(3) == DayDuration(3)
    assert weeks(2) == DayDuration(14)
    assert years(-1) == YearDuration(-1)
    assert hours(2) == DeltaDuration(timedelta(hours=2))
    assert minutes(4) == DeltaDuration(timedelta(minutes=4))
    assert seconds(30) == DeltaDuration(timedelta(seconds=30))
    assert delta(relativedelta(weekday=0)) == DeltaDuration(relativedelta(weekday=0))
