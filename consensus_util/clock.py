"""Utilities for reading a wraparound-tolerant monotonic tick counter."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Final

from . import config

NANOS_PER_MILLI: Final[int] = 1_000_000
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1
_INT64_SPAN: Final[int] = 1 << 64

_SOURCES: Dict[str, Callable[[], int]] = {
    "monotonic": time.monotonic_ns,
    "perf_counter": time.perf_counter_ns,
}
_DEFAULT_SOURCE = "monotonic"

_log = logging.getLogger(__name__)


def wrap_int64(value: int) -> int:
    """Reduce *value* into the signed 64-bit range with two's complement wraparound."""

    return (value - INT64_MIN) % _INT64_SPAN + INT64_MIN


class Clock:
    """Process-wide monotonic tick source.

    Readings are nanosecond-scaled and behave like a signed 64-bit counter: once
    the raw value plus the configured origin offset passes :data:`INT64_MAX` it
    continues from :data:`INT64_MIN`. Only differences between readings carry
    meaning.
    """

    _source: str = config.MONOTONIC_CLOCK_SOURCE
    _offset_ns: int = config.MONOTONIC_TICK_OFFSET_NS

    @classmethod
    def _reader(cls) -> Callable[[], int]:
        reader = _SOURCES.get(cls._source)
        if reader is not None:
            return reader
        _log.warning(
            "Unknown clock source %r, falling back to %s", cls._source, _DEFAULT_SOURCE
        )
        cls._source = _DEFAULT_SOURCE
        return _SOURCES[_DEFAULT_SOURCE]

    @classmethod
    def now_ns(cls) -> int:
        """Return the current tick count in nanoseconds, wrapped to signed 64 bits."""

        return wrap_int64(cls._reader()() + cls._offset_ns)

    @classmethod
    def source_name(cls) -> str:
        """Return the name of the tick source :meth:`now_ns` reads from."""

        cls._reader()
        return cls._source


__all__ = ["Clock", "INT64_MAX", "INT64_MIN", "NANOS_PER_MILLI", "wrap_int64"]
