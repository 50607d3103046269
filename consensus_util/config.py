"""Central configuration constants with environment overrides."""

from __future__ import annotations

import os
from typing import Final


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized or default


MONOTONIC_CLOCK_SOURCE: Final[str] = _get_str("MONOTONIC_CLOCK_SOURCE", "monotonic")
MONOTONIC_TICK_OFFSET_NS: Final[int] = _get_int("MONOTONIC_TICK_OFFSET_NS", 0)

__all__ = [
    "MONOTONIC_CLOCK_SOURCE",
    "MONOTONIC_TICK_OFFSET_NS",
]
