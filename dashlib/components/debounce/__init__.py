"""
Debounce component - Last-call-wins deferred execution.
"""

from ._impl import Debouncer, debounce
from .component import DEFAULT_DELAY_MS, create_debouncer
from .ports import RulesPort, TimerHandle, TimerPort

__all__ = [
    "DEFAULT_DELAY_MS",
    "Debouncer",
    "RulesPort",
    "TimerHandle",
    "TimerPort",
    "create_debouncer",
    "debounce",
]
