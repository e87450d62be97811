"""
Debounce component - Debouncers configured from rules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ._impl import Debouncer
from .ports import RulesPort, TimerPort

DEFAULT_DELAY_MS = 300


def create_debouncer(
    func: Callable[..., Any],
    *,
    rules: RulesPort | None = None,
    delay_ms: float | None = None,
    timer: TimerPort | None = None,
) -> Debouncer:
    """
    Create a Debouncer whose window comes from rules unless given explicitly.

    Args:
        func: Callable to debounce.
        rules: Optional rules port supplying the default window.
        delay_ms: Explicit window; overrides rules.
        timer: Optional timer port.
    """
    if delay_ms is None:
        delay_ms = rules.get_default_delay_ms() if rules is not None else DEFAULT_DELAY_MS
    return Debouncer(func, delay_ms, timer=timer)
