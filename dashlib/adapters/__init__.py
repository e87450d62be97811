from dashlib.adapters.timer import (
    ManualTimerAdapter,
    ManualTimerHandle,
    ThreadingTimerAdapter,
)

__all__ = [
    "ManualTimerAdapter",
    "ManualTimerHandle",
    "ThreadingTimerAdapter",
]
