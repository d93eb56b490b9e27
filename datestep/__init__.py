from .config import configure_datestep, get_datestep_config, reset_datestep_config
from .datelike import (
    Datelike,
    is_leap_year,
    last_day_of_month,
    last_day_of_month_0,
)
from .iterators import (
    ClosedDateIterator,
    ClosedPairwiseDateIterator,
    OpenEndedDateIterator,
    OpenEndedPairwiseDateIterator,
    date_iterator_from,
    date_iterator_from_to,
    date_iterator_to,
)
from .logging import configure_logging, reset_logging
from .ops import (
    AndThen,
    DateOp,
    DayDuration,
    DeltaDuration,
    InvalidDateHandling,
    InvalidDateOperation,
    MonthDuration,
    YearDuration,
    add,
    checked_add,
)
from .units import days, delta, hours, minutes, months, seconds, weeks, years

__all__ = [
    "DateOp",
    "DayDuration",
    "MonthDuration",
    "YearDuration",
    "DeltaDuration",
    "AndThen",
    "InvalidDateHandling",
    "InvalidDateOperation",
    "add",
    "checked_add",
    "days",
    "weeks",
    "months",
    "years",
    "hours",
    "minutes",
    "seconds",
    "delta",
    "Datelike",
    "is_leap_year",
    "last_day_of_month",
    "last_day_of_month_0",
    "OpenEndedDateIterator",
    "ClosedDateIterator",
    "OpenEndedPairwiseDateIterator",
    "ClosedPairwiseDateIterator",
    "date_iterator_from",
    "date_iterator_to",
    "date_iterator_from_to",
    "configure_datestep",
    "get_datestep_config",
    "reset_datestep_config",
    "configure_logging",
    "reset_logging",
]
