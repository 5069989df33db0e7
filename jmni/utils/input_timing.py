"""Helpers for debouncing and throttling high-frequency events."""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional, Tuple

from core.clock import SYSTEM_CLOCK, Clock
from core.scheduler import Scheduler, default_scheduler

__all__ = [
    "Debounced",
    "Throttled",
    "create_debounced",
    "create_throttled",
    "debounce",
    "throttle",
]


log = logging.getLogger(__name__)


class Debounced:
    """Run ``fn`` once a burst of calls has been quiet for ``delay_ms``.

    Every call cancels the pending execution and schedules a new one with the
    latest arguments. With ``immediate=True`` the first call of a burst runs
    ``fn`` synchronously instead; later calls in the burst are deferred as
    usual, and once the deferred execution fires (or :meth:`cancel` is
    called) the next call is treated as the first one again.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        delay_ms: float,
        immediate: bool = False,
        *,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        functools.update_wrapper(self, fn, updated=())
        self._fn = fn
        self._delay_ms = max(0.0, float(delay_ms))
        self._immediate = bool(immediate)
        self._scheduler = scheduler if scheduler is not None else default_scheduler()
        self._handle: Any = None
        self._generation = 0
        self._first_call = True
        self._lock = threading.Lock()

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        """Return True while a deferred execution is scheduled."""

        with self._lock:
            return self._handle is not None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            if self._immediate and self._first_call:
                self._first_call = False
                run_now = True
            else:
                run_now = False
                self._cancel_locked()
                generation = self._generation
        if run_now:
            return self._fn(*args, **kwargs)

        # Scheduled outside the lock: a scheduler may run the callback inline.
        handle = self._scheduler.schedule(
            self._delay_ms,
            lambda: self._fire(generation, args, kwargs),
        )
        with self._lock:
            if generation == self._generation:
                self._handle = handle
            else:
                # Already fired inline, or superseded while scheduling.
                self._scheduler.cancel(handle)
        return None

    def cancel(self) -> None:
        """Drop the pending execution and start over with a fresh burst."""

        with self._lock:
            self._cancel_locked()
            self._first_call = True

    def _cancel_locked(self) -> None:
        self._generation += 1
        if self._handle is None:
            return
        log.debug("Cancelling pending call to %r", self._fn)
        self._scheduler.cancel(self._handle)
        self._handle = None

    def _fire(self, generation: int, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        with self._lock:
            # A timer that lost the race against cancel() or a newer call.
            if generation != self._generation:
                return
            self._generation += 1
            self._handle = None
            self._first_call = True
        self._fn(*args, **kwargs)


class Throttled:
    """Run ``fn`` at most once per ``interval_ms``; extra calls are dropped."""

    def __init__(
        self,
        fn: Callable[..., Any],
        interval_ms: float,
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        functools.update_wrapper(self, fn, updated=())
        self._fn = fn
        self._interval_ms = max(0.0, float(interval_ms))
        self._clock = clock if clock is not None else SYSTEM_CLOCK
        self._last: Optional[float] = None
        self._lock = threading.Lock()

    @property
    def interval_ms(self) -> float:
        return self._interval_ms

    def allow(self) -> bool:
        """Return True and record the time if the interval has elapsed."""

        now = self._clock.now_ms()
        with self._lock:
            last = self._last
            if last is None or now - last >= self._interval_ms:
                self._last = now
                return True
            return False

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not self.allow():
            return None
        return self._fn(*args, **kwargs)

    def reset(self) -> None:
        """Forget the last execution so the next call runs."""

        with self._lock:
            self._last = None


def create_debounced(
    fn: Callable[..., Any],
    delay_ms: float,
    immediate: bool = False,
    *,
    scheduler: Optional[Scheduler] = None,
) -> Debounced:
    """Wrap ``fn`` in a :class:`Debounced`.

    Example::

        search = create_debounced(run_search, 300)
        search("py")
        search("pyt")  # only run_search("pyt") runs, 300 ms later
    """

    return Debounced(fn, delay_ms, immediate, scheduler=scheduler)


def create_throttled(
    fn: Callable[..., Any],
    interval_ms: float,
    *,
    clock: Optional[Clock] = None,
) -> Throttled:
    """Wrap ``fn`` in a :class:`Throttled`."""

    return Throttled(fn, interval_ms, clock=clock)


debounce = create_debounced
throttle = create_throttled
