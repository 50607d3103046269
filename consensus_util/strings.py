"""String normalisation helpers shared across the consensus code."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterable, List, Optional, Tuple, TypeVar, Union

__all__ = [
    "EMPTY_STRINGS",
    "bytes_to_hex",
    "cyclic_next",
    "format_string",
    "parse_boolean",
    "split_trimmed",
    "weak_intern",
]

T = TypeVar("T")

EMPTY_STRINGS: Tuple[str, ...] = ()

_COMMA_SEPARATOR = re.compile(r"\s*,\s*", re.ASCII)
# Space and every ASCII control character below it.
_TRIMMED_CHARS = "".join(chr(code) for code in range(0x21))


def weak_intern(sample: Optional[str]) -> Optional[str]:
    """Return the canonical instance for the content of *sample*.

    Interning equal content again while any reference survives yields the
    identical object. ``None`` is passed through.

    Where the interpreter keeps interned strings mortal (CPython 3.9 to 3.11)
    an entry is reclaimed once every caller has dropped it. Releases that make
    interned strings immortal (CPython 3.12, free-threaded builds) never evict,
    and the table grows with the number of distinct values interned.
    """

    if sample is None:
        return None
    if not isinstance(sample, str):
        raise TypeError(f"Expected str, got {type(sample).__name__}")
    if type(sample) is not str:
        # sys.intern only accepts exact str instances.
        sample = str.__str__(sample)
    return sys.intern(sample)


def split_trimmed(s: Optional[str]) -> List[str]:
    """Split a comma separated string and trim every value.

    Only ASCII whitespace and control characters are trimmed. Returns an empty
    list for ``None`` or blank input. Empty values between two commas are kept,
    trailing empty values are dropped.
    """

    if s is None:
        return []
    s = s.strip(_TRIMMED_CHARS)
    if not s:
        return []
    values = _COMMA_SEPARATOR.split(s)
    while values and not values[-1]:
        values.pop()
    return values


def format_string(fmt: str, *args: Any) -> str:
    """Apply ``%``-style formatting, independent of the process locale."""

    return fmt % args


def bytes_to_hex(data: Optional[Union[bytes, bytearray, memoryview, Iterable[int]]]) -> str:
    """Return *data* as lowercase hex, two digits per byte."""

    if data is None:
        raise ValueError("data must not be None")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).hex()

    digits: List[str] = []
    for value in data:
        if not -128 <= value <= 255:
            raise ValueError(f"Byte value out of range: {value}")
        digits.append(format_string("%02x", value & 0xFF))
    return "".join(digits)


def parse_boolean(s: Optional[str], default: bool) -> bool:
    """Parse ``"true"``/``"false"`` case-insensitively, else return *default*."""

    if not s:
        return default
    lowered = s.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return default


def cyclic_next(given: T, items: Iterable[T]) -> T:
    """Return the item following *given* in *items*, wrapping to the first.

    The first item is also returned when *given* does not occur. *items* is
    consumed once, so one-shot iterators are accepted.

    Raises:
        ValueError: If *given* or *items* is ``None``, or *items* is empty.
    """

    if given is None:
        raise ValueError("given must not be None")
    if items is None:
        raise ValueError("items must not be None")
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("items must not be empty") from None

    current = first
    for following in iterator:
        if current == given:
            return following
        current = following
    return first
