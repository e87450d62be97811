"""
Debounce component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback if it has not run yet."""
        ...


class TimerPort(Protocol):
    """Timer scheduling interface."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after delay_seconds. Returns a cancellable handle."""
        ...


class RulesPort(Protocol):
    """Port for debounce rules configuration."""

    def get_default_delay_ms(self) -> int:
        """Get the default debounce window in milliseconds."""
        ...
