"""
Debouncer - Collapse bursts of calls into one deferred call.

Key behaviors:
- Each call cancels the pending schedule and schedules a new one
- Only the last call within a delay window runs, with its arguments
- At most one schedule is pending per Debouncer
- cancel() drops the pending call without running it
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

from .ports import TimerHandle, TimerPort

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Debounced wrapper around a callable.

    The pending schedule is tracked with a token so a timer that fires after
    being superseded (a race inherent to threading.Timer.cancel) is ignored.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        delay_ms: float,
        *,
        timer: TimerPort | None = None,
    ) -> None:
        """
        Initialize debouncer.

        Args:
            func: Callable to run after the calls settle
            delay_ms: Debounce window in milliseconds
            timer: Timer port (defaults to ThreadingTimerAdapter)

        Raises:
            ValueError: If delay_ms is negative.
        """
        if delay_ms < 0:
            raise ValueError(f"delay_ms must not be negative, got {delay_ms}")

        if timer is None:
            from dashlib.adapters.timer import ThreadingTimerAdapter

            timer = ThreadingTimerAdapter()

        self._func = func
        self._delay_ms = delay_ms
        self._timer = timer
        self._lock = Lock()
        self._handle: TimerHandle | None = None
        self._token: object | None = None

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        """True while a call is scheduled and has not yet run."""
        with self._lock:
            return self._token is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.call(*args, **kwargs)

    def call(self, *args: Any, **kwargs: Any) -> None:
        """Schedule func(*args, **kwargs), superseding any pending call."""
        token = object()

        with self._lock:
            if self._handle is not None:
                logger.debug("Superseding pending call to %r", self._func)
                self._handle.cancel()

            self._token = token
            self._handle = self._timer.schedule(
                self._delay_ms / 1000,
                lambda: self._fire(token, args, kwargs),
            )

    def cancel(self) -> None:
        """Drop the pending call, if any, without running it."""
        with self._lock:
            if self._handle is None:
                return
            logger.debug("Cancelled pending call to %r", self._func)
            self._handle.cancel()
            self._handle = None
            self._token = None

    def _fire(self, token: object, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        with self._lock:
            if token is not self._token:
                return
            self._handle = None
            self._token = None

        self._func(*args, **kwargs)


def debounce(
    func: Callable[..., Any],
    delay_ms: float,
    *,
    timer: TimerPort | None = None,
) -> Debouncer:
    """Wrap func so only the last call within delay_ms actually runs."""
    return Debouncer(func, delay_ms, timer=timer)
