"""The date-like collaborator and small calendar helpers.

datestep never owns a date representation. Anything with ``year``,
``month`` and ``day`` attributes, a ``replace(**fields)`` that raises
``ValueError`` for an impossible date, and ``<`` ordering can be stepped.
``datetime.date`` and ``datetime.datetime`` both qualify.
"""

from typing import Any, Protocol, TypeVar

from typing_extensions import Self

# Days per month in a common year, January first
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Datelike(Protocol):
    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...

    def replace(self, **fields: Any) -> Self: ...

    def __lt__(self, other: Any, /) -> bool: ...


D = TypeVar("D", bound=Datelike)


def _with_field(dt: D, **field: int) -> D | None:
    try:
        return dt.replace(**field)
    except (ValueError, OverflowError):
        return None


def with_year(dt: D, year: int) -> D | None:
    """Return a copy of dt in the given year, or None if that date is invalid."""
    return _with_field(dt, year=year)


def with_month(dt: D, month: int) -> D | None:
    """Return a copy of dt in the given month (1-12), or None if invalid."""
    return _with_field(dt, month=month)


def with_day(dt: D, day: int) -> D | None:
    """Return a copy of dt on the given day of month, or None if invalid."""
    return _with_field(dt, day=day)


def with_ymd(dt: D, year: int, month: int, day: int) -> D | None:
    """Move dt to year/month/day one field at a time.

    The day is parked on the 1st while year and month change so that no
    intermediate state is invalid (e.g. going from Jan 31 to Apr 30 never
    passes through Apr 31).
    """
    moved = with_year(dt, year)
    if moved is None:
        return None
    moved = with_day(moved, 1)
    if moved is None:
        return None
    moved = with_month(moved, month)
    if moved is None:
        return None
    return with_day(moved, day)


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def last_day_of_month(year: int, month: int) -> int:
    """Return the last day of a month, where month is one-based (January = 1).

    Works for any integer year, including years the date type cannot hold.

    Raises:
        ValueError: If month is not in 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(
            f"month must be in range [1, 12], got {month}.\n"
            f"Hint: use last_day_of_month_0() for zero-based months"
        )
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def last_day_of_month_0(year: int, month0: int) -> int:
    """Return the last day of a month, where month is zero-based (January = 0).

    Raises:
        ValueError: If month0 is not in 0-11
    """
    if not 0 <= month0 <= 11:
        raise ValueError(
            f"month0 must be in range [0, 11], got {month0}.\n"
            f"Hint: use last_day_of_month() for one-based months"
        )
    return last_day_of_month(year, month0 + 1)
