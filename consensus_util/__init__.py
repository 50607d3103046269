"""Monotonic timestamps and string helpers for the consensus subsystem."""

from .clock import INT64_MAX, INT64_MIN, NANOS_PER_MILLI, Clock, wrap_int64
from .strings import (
    EMPTY_STRINGS,
    bytes_to_hex,
    cyclic_next,
    format_string,
    parse_boolean,
    split_trimmed,
    weak_intern,
)
from .timestamp import Timestamp, compare, latest

__all__ = [
    "Clock",
    "EMPTY_STRINGS",
    "INT64_MAX",
    "INT64_MIN",
    "NANOS_PER_MILLI",
    "Timestamp",
    "bytes_to_hex",
    "compare",
    "cyclic_next",
    "format_string",
    "latest",
    "parse_boolean",
    "split_trimmed",
    "weak_intern",
    "wrap_int64",
]
