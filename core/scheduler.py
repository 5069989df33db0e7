"""Delayed-callback schedulers used by the rate-limiting helpers."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional, Protocol

__all__ = [
    "Scheduler",
    "ThreadingScheduler",
    "KivyScheduler",
    "default_scheduler",
]


log = logging.getLogger(__name__)


def _delay_s(delay_ms: float) -> float:
    return max(0.0, float(delay_ms)) / 1000.0


class Scheduler(Protocol):
    """Run a callback once after a delay, with the option to cancel it."""

    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class ThreadingScheduler:
    """Scheduler backed by one daemon :class:`threading.Timer` per callback."""

    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> threading.Timer:
        timer = threading.Timer(_delay_s(delay_ms), callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class KivyScheduler:
    """Scheduler that runs callbacks on the Kivy main loop.

    ``Clock.schedule_once`` works in seconds and passes the elapsed ``dt`` to
    the callback; both are hidden behind the millisecond, no-argument
    interface of :class:`Scheduler`.
    """

    def __init__(self, clock: Optional[Any] = None) -> None:
        if clock is None:
            from kivy.clock import Clock as clock  # type: ignore
        self._clock = clock

    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> Any:
        def _run(_dt: float) -> None:
            callback()

        return self._clock.schedule_once(_run, _delay_s(delay_ms))

    def cancel(self, handle: Any) -> None:
        handle.cancel()


_default: Optional[ThreadingScheduler] = None
_default_lock = threading.Lock()


def default_scheduler() -> ThreadingScheduler:
    """Return the process-wide threading scheduler."""

    global _default
    with _default_lock:
        if _default is None:
            log.debug("Creating default threading scheduler")
            _default = ThreadingScheduler()
        return _default
