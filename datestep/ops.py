"""Calendar durations that can be scaled and added to date-likes.

A ``DateOp`` is a fixed shape of calendar offset ("3 months", "2 days",
"1 year then 4 hours") that is not tied to any origin until applied::

    >>> from datetime import date
    >>> from datestep import days, months, years, InvalidDateHandling
    >>> op = days(3) >> months(1, InvalidDateHandling.PREVIOUS) >> years(1)
    >>> op.add_to(date(2023, 1, 28))
    datetime.date(2024, 2, 28)

Every failure (overflow, an impossible date, a rejected month end) is
reported as ``None``; nothing in this module raises for calendar reasons
except ``add()``, which exists for callers who want an exception.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any, Generic

from dateutil.relativedelta import relativedelta
from typing_extensions import Self, override

from datestep.datelike import D, last_day_of_month, with_year, with_ymd
from datestep.util import (
    checked_int_add,
    checked_int_mul,
    in_range,
    require_magnitude,
)


class InvalidDateHandling(Enum):
    """What a month step does when the day does not exist in the target month."""

    # Return None instead of an invalid date
    REJECT = "reject"
    # Clamp to the last day of the target month (Apr 31 -> Apr 30)
    PREVIOUS = "previous"
    # Roll to the first day of the following month (Apr 31 -> May 1)
    NEXT = "next"


class DateOp(ABC, Generic[D]):
    """Capability shared by every duration kind and by chains of them."""

    @abstractmethod
    def times(self, n: int) -> Self | None:
        """Return this duration applied n times, or None on overflow.

        Scaling is what lets iteration work: adding one month to Jan 31
        has no exact answer, but adding two months does.
        """
        pass

    @abstractmethod
    def add_to(self, dt: D) -> D | None:
        """Return dt offset by this duration, or None if that is impossible."""
        pass

    def and_then(self, other: "DateOp[D]") -> "AndThen[D]":
        """Chain other to be applied after this duration."""
        return AndThen(self, other)

    def __rshift__(self, other: "DateOp[D]") -> "AndThen[D]":
        if not isinstance(other, DateOp):
            return NotImplemented
        return self.and_then(other)


@dataclass(frozen=True)
class DayDuration(DateOp[D]):
    """A whole number of days, using plain day arithmetic."""

    days: int

    def __post_init__(self) -> None:
        require_magnitude(self.days, "days")

    @override
    def times(self, n: int) -> "DayDuration[D] | None":
        scaled = checked_int_mul(self.days, n) if in_range(n) else None
        return None if scaled is None else DayDuration(scaled)

    @override
    def add_to(self, dt: D) -> D | None:
        try:
            ordinal = date(dt.year, dt.month, dt.day).toordinal() + self.days
            target = date.fromordinal(ordinal)
        except (ValueError, OverflowError):
            return None
        return with_ymd(dt, target.year, target.month, target.day)


@dataclass(frozen=True)
class MonthDuration(DateOp[D]):
    """A whole number of months.

    Months vary in length, so while one month can always be added to
    2017-05-01, adding one month to 2017-01-30 has no exact answer.
    ``handling`` decides what happens then: reject the step, clamp to the
    last day of the target month, or roll to the 1st of the month after.
    """

    months: int
    handling: InvalidDateHandling

    def __post_init__(self) -> None:
        require_magnitude(self.months, "months")
        if not isinstance(self.handling, InvalidDateHandling):
            raise TypeError(
                f"handling must be an InvalidDateHandling, "
                f"got {type(self.handling).__name__!r}: {self.handling!r}\n"
                f"Example: MonthDuration(1, InvalidDateHandling.PREVIOUS)"
            )

    @override
    def times(self, n: int) -> "MonthDuration[D] | None":
        scaled = checked_int_mul(self.months, n) if in_range(n) else None
        return None if scaled is None else MonthDuration(scaled, self.handling)

    @override
    def add_to(self, dt: D) -> D | None:
        # Floor division keeps month0 in [0, 11] and carries negative
        # offsets into the previous year
        total = (dt.month - 1) + self.months
        carry, month0 = divmod(total, 12)
        year = checked_int_add(dt.year, carry)
        if year is None:
            return None

        day = dt.day
        last_day = last_day_of_month(year, month0 + 1)
        if day > last_day:
            if self.handling is InvalidDateHandling.REJECT:
                return None
            if self.handling is InvalidDateHandling.PREVIOUS:
                day = last_day
            else:
                day = 1
                month0 = (month0 + 1) % 12
                if month0 == 0:
                    year = checked_int_add(year, 1)
                    if year is None:
                        return None

        return with_ymd(dt, year, month0 + 1, day)


@dataclass(frozen=True)
class YearDuration(DateOp[D]):
    """A whole number of years; Feb 29 into a common year yields None."""

    years: int

    def __post_init__(self) -> None:
        require_magnitude(self.years, "years")

    @override
    def times(self, n: int) -> "YearDuration[D] | None":
        scaled = checked_int_mul(self.years, n) if in_range(n) else None
        return None if scaled is None else YearDuration(scaled)

    @override
    def add_to(self, dt: D) -> D | None:
        year = checked_int_add(dt.year, self.years)
        if year is None:
            return None
        return with_year(dt, year)


@dataclass(frozen=True)
class DeltaDuration(DateOp[D]):
    """Pass-through for the date type's own addition.

    Wraps a ``timedelta`` (hours, minutes, ...) or a dateutil
    ``relativedelta`` and defers entirely to ``dt + delta``.
    """

    delta: timedelta | relativedelta

    def __post_init__(self) -> None:
        if not isinstance(self.delta, (timedelta, relativedelta)):
            raise TypeError(
                f"delta must be a timedelta or relativedelta, "
                f"got {type(self.delta).__name__!r}: {self.delta!r}\n"
                f"Example: DeltaDuration(timedelta(hours=1))"
            )

    @override
    def times(self, n: int) -> "DeltaDuration[D] | None":
        if not in_range(n):
            return None
        try:
            return DeltaDuration(self.delta * n)
        except OverflowError:
            return None

    @override
    def add_to(self, dt: D) -> D | None:
        try:
            return dt + self.delta  # type: ignore[operator]
        except (ValueError, OverflowError):
            return None


@dataclass(frozen=True)
class AndThen(DateOp[D]):
    """Two durations applied consecutively: first, then second."""

    first: DateOp[D]
    second: DateOp[D]

    @override
    def times(self, n: int) -> "AndThen[D] | None":
        first = self.first.times(n)
        if first is None:
            return None
        second = self.second.times(n)
        if second is None:
            return None
        return AndThen(first, second)

    @override
    def add_to(self, dt: D) -> D | None:
        intermediate = self.first.add_to(dt)
        if intermediate is None:
            return None
        return self.second.add_to(intermediate)


class InvalidDateOperation(ValueError):
    """Raised by add() when a duration cannot be applied to a date."""

    def __init__(self, dt: Any, op: DateOp[Any]):
        super().__init__(
            f"Cannot add {op!r} to {dt!r}.\n"
            f"The result is out of range or not a valid date.\n"
            f"Hint: use checked_add() to get None instead of an exception"
        )
        self.dt: Any = dt
        self.op: DateOp[Any] = op


def checked_add(dt: D, op: DateOp[D]) -> D | None:
    """Return dt + op, or None if the operation fails."""
    return op.add_to(dt)


def add(dt: D, op: DateOp[D]) -> D:
    """Return dt + op.

    Raises:
        InvalidDateOperation: If the operation fails
    """
    result = op.add_to(dt)
    if result is None:
        raise InvalidDateOperation(dt, op)
    return result
