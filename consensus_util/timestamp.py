"""Immutable monotonic timestamps that tolerate tick counter overflow.

A :class:`Timestamp` wraps a single signed 64-bit tick reading taken from
:class:`~consensus_util.clock.Clock`. Two timestamps are ordered by the sign of
the wrapped difference of their ticks rather than by the raw values, so the
order stays correct when the counter wraps between the two readings. This
holds as long as the real time between them is below half the 64-bit range.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from .clock import NANOS_PER_MILLI, Clock, wrap_int64


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


@functools.total_ordering
@dataclass(frozen=True)
class Timestamp:
    """Point in time on the process-local monotonic clock.

    Instances are never mutated, so they can be shared between threads without
    locking.
    """

    ticks: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticks, int) or isinstance(self.ticks, bool):
            raise TypeError("ticks must be an int")
        object.__setattr__(self, "ticks", wrap_int64(self.ticks))

    @classmethod
    def now(cls) -> Timestamp:
        """Return a timestamp holding the current clock reading."""

        return cls(Clock.now_ns())

    def plus_millis(self, ms: int) -> Timestamp:
        """Return a new timestamp *ms* milliseconds after this one.

        The addition wraps like 64-bit arithmetic; comparisons resolve the wrap.
        """

        return Timestamp(self.ticks + ms * NANOS_PER_MILLI)

    def elapsed_millis(self) -> int:
        """Return the milliseconds elapsed since this timestamp.

        Timestamps in the future yield a negative value.
        """

        delta = wrap_int64(Clock.now_ns() - self.ticks)
        return _div_toward_zero(delta, NANOS_PER_MILLI)

    def compare_to(self, other: Timestamp) -> int:
        """Return -1, 0 or 1 as this timestamp is earlier, equal or later than *other*."""

        if not isinstance(other, Timestamp):
            raise TypeError(f"Expected Timestamp, got {type(other).__name__}")
        delta = wrap_int64(self.ticks - other.ticks)
        if delta > 0:
            return 1
        if delta == 0:
            return 0
        return -1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        return f"{self.ticks}ns"


def compare(a: Timestamp, b: Timestamp) -> int:
    """Overflow-safe three-way comparison of two timestamps."""

    return a.compare_to(b)


def latest(a: Timestamp, b: Timestamp) -> Timestamp:
    """Return the later of *a* and *b*; *b* when they are equal."""

    return a if a.compare_to(b) > 0 else b


__all__ = ["Timestamp", "compare", "latest"]
