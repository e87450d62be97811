"""
Timer Adapters.

Implements the TimerPort interface used by the debounce component.

Key behaviors:
- ThreadingTimerAdapter: daemon threading.Timer per schedule; callback
  exceptions are logged since there is no caller to propagate to
- ManualTimerAdapter: callbacks run only when advance() moves the clock,
  for deterministic testing
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class ThreadingTimerAdapter:
    """Timer adapter backed by threading.Timer."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
        """Run callback on a daemon thread after delay_seconds."""
        timer = threading.Timer(delay_seconds, self._run, args=(callback,))
        timer.daemon = True
        timer.start()
        return timer

    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:
            logger.exception("Error in scheduled callback")


@dataclass
class ManualTimerHandle:
    """Handle returned by ManualTimerAdapter."""

    due_ms: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualTimerAdapter:
    """
    Timer adapter driven by an explicit clock.

    Useful for deterministic testing: nothing runs until advance() is called.
    """

    now_ms: float = 0.0
    _scheduled: list[ManualTimerHandle] = field(default_factory=list)

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> ManualTimerHandle:
        """Register callback to run once the clock reaches now + delay."""
        # Round away float noise from the ms -> s -> ms conversion
        due_ms = self.now_ms + round(delay_seconds * 1000, 6)
        handle = ManualTimerHandle(due_ms=due_ms, callback=callback)
        self._scheduled.append(handle)
        return handle

    @property
    def pending_count(self) -> int:
        """Number of scheduled callbacks that are neither cancelled nor fired."""
        return sum(1 for h in self._scheduled if not h.cancelled and not h.fired)

    def advance(self, delta_ms: float) -> int:
        """
        Advance the clock by delta_ms and run every callback that became due.

        Callbacks run in due order with the clock set to their due time, so a
        callback that schedules another timer counts its delay from when it
        fired. Exceptions propagate to the caller.

        Returns:
            Number of callbacks run.
        """
        target_ms = self.now_ms + delta_ms
        ran = 0

        while True:
            due = [
                h
                for h in self._scheduled
                if not h.cancelled and not h.fired and h.due_ms <= target_ms
            ]
            if not due:
                break
            handle = min(due, key=lambda h: h.due_ms)
            handle.fired = True
            self.now_ms = max(self.now_ms, handle.due_ms)
            handle.callback()
            ran += 1

        self.now_ms = target_ms
        self._scheduled = [h for h in self._scheduled if not h.cancelled and not h.fired]
        return ran
