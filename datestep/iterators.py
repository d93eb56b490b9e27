"""Date iterators: "start at X and every <duration> afterwards".

Every value is derived from the origin, never from the value before it.
The n-th date is ``duration.times(n).add_to(origin)``, because calendar
steps do not compose: stepping Jan 31 by one clamped month gives Feb 28,
and stepping Feb 28 by one month gives Mar 28, while Jan 31 plus two
months is Mar 31.

    >>> from datetime import date
    >>> from datestep import date_iterator_from, months
    >>> ends = date_iterator_from(date(2023, 1, 31), months(1, "previous"))
    >>> [next(ends).isoformat() for _ in range(3)]
    ['2023-01-31', '2023-02-28', '2023-03-31']

The first step that cannot be computed (overflow, a rejected date) ends
the sequence for good, even if a later step could have succeeded.
"""

from collections.abc import Iterable, Iterator
from typing import Generic

from datestep.datelike import D
from datestep.logging import get_logger
from datestep.ops import DateOp

logger = get_logger(__name__)


class OpenEndedDateIterator(Generic[D]):
    """Yields origin, origin + duration, origin + 2 * duration, ...

    As returned by ``date_iterator_from``.
    """

    def __init__(self, origin: D, duration: DateOp[D]):
        self._origin: D = origin
        self._duration: DateOp[D] = duration
        self._step: int = 0
        self._exhausted: bool = False

    @property
    def origin(self) -> D:
        return self._origin

    @property
    def duration(self) -> DateOp[D]:
        return self._duration

    @property
    def step(self) -> int:
        """Index of the value the next call to ``next()`` will compute."""
        return self._step

    def current(self) -> D | None:
        """Compute the value at the current step without advancing."""
        scaled = self._duration.times(self._step)
        if scaled is None:
            return None
        return scaled.add_to(self._origin)

    def to(self, bound: D) -> "ClosedDateIterator[D]":
        """Stop iteration once ``bound`` is reached (``bound`` is not included)."""
        return ClosedDateIterator(self, bound)

    def pairwise(self) -> "OpenEndedPairwiseDateIterator[D]":
        """Yield (start, end) tuples of adjacent dates.

        Useful for slicing a time range into e.g. months. Taking each
        yielded date and adding the duration once more is not the same
        thing: from Jan 31 by one clamped month, pairwise gives
        (Jan 31, Feb 28), (Feb 28, Mar 31), (Mar 31, Apr 30), whereas
        re-adding gives the overlapping (Feb 28, Mar 28).
        """
        return OpenEndedPairwiseDateIterator(self)

    def __iter__(self) -> Iterator[D]:
        return self

    def __next__(self) -> D:
        if self._exhausted:
            raise StopIteration
        value = self.current()
        # The counter moves even when this step failed
        self._step += 1
        if value is None:
            self._exhausted = True
            logger.debug("date_iterator.exhausted", step=self._step - 1)
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(origin={self._origin!r}, "
            f"duration={self._duration!r}, step={self._step})"
        )


class ClosedDateIterator(Generic[D]):
    """Yields dates from another iterator while they are below ``bound``.

    The first date that is not strictly less than ``bound`` ends the
    sequence; later dates are never inspected.
    """

    def __init__(self, source: Iterable[D], bound: D):
        self._source: Iterator[D] = iter(source)
        self._bound: D = bound
        self._done: bool = False

    @property
    def bound(self) -> D:
        return self._bound

    def pairwise(self) -> "ClosedPairwiseDateIterator[D]":
        """Bounded version of ``OpenEndedDateIterator.pairwise()``.

        The bound applies to the first element of each pair, so the last
        pair may end on or after ``bound``.

        Raises:
            TypeError: If this iterator does not wrap an OpenEndedDateIterator
        """
        if not isinstance(self._source, OpenEndedDateIterator):
            raise TypeError(
                f"pairwise() needs a bounded OpenEndedDateIterator, "
                f"got a bound over {type(self._source).__name__!r}.\n"
                f"Hint: build it with date_iterator_from(dt, op).to(bound)"
            )
        return ClosedPairwiseDateIterator(self._source.pairwise(), self._bound)

    def __iter__(self) -> Iterator[D]:
        return self

    def __next__(self) -> D:
        if self._done:
            raise StopIteration
        try:
            value = next(self._source)
        except StopIteration:
            self._done = True
            raise
        if not value < self._bound:
            self._done = True
            logger.debug("date_iterator.bound_reached", bound=self._bound)
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r}, bound={self._bound!r})"


class OpenEndedPairwiseDateIterator(Generic[D]):
    """Yields (date_n, date_n+1) tuples; see ``OpenEndedDateIterator.pairwise``."""

    def __init__(self, source: OpenEndedDateIterator[D]):
        self._source: OpenEndedDateIterator[D] = source
        self._exhausted: bool = False

    def __iter__(self) -> Iterator[tuple[D, D]]:
        return self

    def __next__(self) -> tuple[D, D]:
        if self._exhausted:
            raise StopIteration
        try:
            start = next(self._source)
        except StopIteration:
            self._exhausted = True
            raise
        # Computed from the origin at the following step, not start + duration
        end = self._source.current()
        if end is None:
            self._exhausted = True
            logger.debug("date_iterator.exhausted", step=self._source.step)
            raise StopIteration
        return start, end

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r})"


class ClosedPairwiseDateIterator(Generic[D]):
    """Yields pairs while the first date of the pair is below ``bound``."""

    def __init__(self, source: OpenEndedPairwiseDateIterator[D], bound: D):
        self._source: OpenEndedPairwiseDateIterator[D] = source
        self._bound: D = bound
        self._done: bool = False

    @property
    def bound(self) -> D:
        return self._bound

    def __iter__(self) -> Iterator[tuple[D, D]]:
        return self

    def __next__(self) -> tuple[D, D]:
        if self._done:
            raise StopIteration
        try:
            pair = next(self._source)
        except StopIteration:
            self._done = True
            raise
        if not pair[0] < self._bound:
            self._done = True
            logger.debug("date_iterator.bound_reached", bound=self._bound)
            raise StopIteration
        return pair

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r}, bound={self._bound!r})"


def date_iterator_from(dt: D, duration: DateOp[D]) -> OpenEndedDateIterator[D]:
    """Return an open-ended iterator that first yields ``dt``.

    Example:
        >>> from itertools import islice
        >>> from datetime import date
        >>> from datestep import date_iterator_from, days
        >>> list(islice(date_iterator_from(date(2024, 2, 28), days(1)), 2))
        [datetime.date(2024, 2, 28), datetime.date(2024, 2, 29)]
    """
    return OpenEndedDateIterator(dt, duration)


def date_iterator_to(source: Iterable[D], bound: D) -> ClosedDateIterator[D]:
    """Bound any iterable of dates; iteration stops when ``bound`` is reached.

    ``bound`` itself is never yielded.
    """
    return ClosedDateIterator(source, bound)


def date_iterator_from_to(
    dt: D, duration: DateOp[D], bound: D
) -> ClosedDateIterator[D]:
    """Iterate from ``dt`` stepped by ``duration``, stopping before ``bound``."""
    return date_iterator_from(dt, duration).to(bound)
