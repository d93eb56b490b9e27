"""Shorthand constructors for durations.

    >>> from datestep import days, hours, months, years
    >>> every_other_month = months(2, "previous")
    >>> long_weekend = days(3) >> hours(12)
"""

from datetime import timedelta

from dateutil.relativedelta import relativedelta

from datestep.config import get_datestep_config
from datestep.datelike import Datelike
from datestep.ops import (
    DayDuration,
    DeltaDuration,
    InvalidDateHandling,
    MonthDuration,
    YearDuration,
)


def days(n: int) -> DayDuration[Datelike]:
    return DayDuration(n)


def weeks(n: int) -> DayDuration[Datelike]:
    """n weeks, as 7 * n days."""
    return DayDuration(7 * n)


def months(
    n: int, handling: InvalidDateHandling | str | None = None
) -> MonthDuration[Datelike]:
    """n months, resolving impossible days with ``handling``.

    Without ``handling`` the configured default is used
    (``InvalidDateHandling.REJECT`` unless changed via configure_datestep).
    """
    if handling is None:
        handling = get_datestep_config().default_invalid_date_handling
    return MonthDuration(n, InvalidDateHandling(handling))


def years(n: int) -> YearDuration[Datelike]:
    return YearDuration(n)


def hours(n: int) -> DeltaDuration[Datelike]:
    return DeltaDuration(timedelta(hours=n))


def minutes(n: int) -> DeltaDuration[Datelike]:
    return DeltaDuration(timedelta(minutes=n))


def seconds(n: int) -> DeltaDuration[Datelike]:
    return DeltaDuration(timedelta(seconds=n))


def delta(value: timedelta | relativedelta) -> DeltaDuration[Datelike]:
    """Wrap any native delta so it can be chained with calendar durations."""
    return DeltaDuration(value)
