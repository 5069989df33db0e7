"""Clock utilities for epoch and monotonic timekeeping."""

from __future__ import annotations

import time
from typing import Protocol

__all__ = [
    "Clock",
    "SystemClock",
    "SYSTEM_CLOCK",
    "now_ns",
    "now_ms",
    "now_mono",
    "now_mono_ms",
]


def now_ns() -> int:
    """Return a UNIX epoch timestamp in nanoseconds."""
    return time.time_ns()


def now_ms() -> int:
    """Return a UNIX epoch timestamp in whole milliseconds."""
    return time.time_ns() // 1_000_000


def now_mono() -> float:
    """Return the current monotonic time in seconds."""
    return time.monotonic()


def now_mono_ms() -> float:
    """Return the current monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class Clock(Protocol):
    """Source of the current time in milliseconds."""

    def now_ms(self) -> float:
        ...


class SystemClock:
    """Monotonic host clock; only differences between readings are meaningful."""

    def now_ms(self) -> float:
        return now_mono_ms()


SYSTEM_CLOCK = SystemClock()
