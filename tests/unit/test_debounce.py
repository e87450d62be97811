"""
Debounce component tests.

Driven by ManualTimerAdapter so no test sleeps.
"""

from __future__ import annotations

from typing import Any

import pytest

from dashlib.adapters.timer import ManualTimerAdapter
from dashlib.components.debounce import (
    DEFAULT_DELAY_MS,
    Debouncer,
    create_debouncer,
    debounce,
)
from dashlib.rules import DashRules, DebounceRules, RulesAdapter


class Recorder:
    """Callable that records every invocation."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append((args, kwargs))


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


class TestLastCallWins:
    """Bursts collapse into a single invocation."""

    def test_single_call_runs_after_delay(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        debounced("a")

        manual_timer.advance(99)
        assert recorder.calls == []

        manual_timer.advance(1)
        assert recorder.calls == [(("a",), {})]

    def test_burst_runs_once_with_last_args(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        for i in range(10):
            debounced(i, key=i)
            manual_timer.advance(50)

        assert recorder.calls == []
        manual_timer.advance(50)
        assert recorder.calls == [((9,), {"key": 9})]

    def test_each_call_restarts_window(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        debounced("first")
        manual_timer.advance(90)
        debounced("second")
        manual_timer.advance(90)
        assert recorder.calls == []
        manual_timer.advance(10)
        assert recorder.calls == [(("second",), {})]

    def test_separate_windows_run_separately(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        debounced(1)
        manual_timer.advance(100)
        debounced(2)
        manual_timer.advance(100)
        assert recorder.calls == [((1,), {}), ((2,), {})]

    def test_at_most_one_pending(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        for _ in range(5):
            debounced()
        assert manual_timer.pending_count == 1
        assert debounced.pending

    def test_zero_delay(self, recorder: Recorder, manual_timer: ManualTimerAdapter) -> None:
        debounced = debounce(recorder, 0, timer=manual_timer)
        debounced("now")
        assert recorder.calls == []
        manual_timer.advance(0)
        assert recorder.calls == [(("now",), {})]

    def test_call_method_equivalent(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = Debouncer(recorder, 10, timer=manual_timer)
        debounced.call("x")
        manual_timer.advance(10)
        assert recorder.calls == [(("x",), {})]

    def test_instances_independent(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        first = debounce(recorder, 100, timer=manual_timer)
        second = debounce(recorder, 100, timer=manual_timer)
        first("a")
        second("b")
        manual_timer.advance(100)
        assert sorted(args for args, _ in recorder.calls) == [("a",), ("b",)]


class TestCancel:
    def test_cancel_drops_pending(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        debounced("dropped")
        debounced.cancel()

        assert not debounced.pending
        manual_timer.advance(1000)
        assert recorder.calls == []

    def test_cancel_without_pending_is_noop(self, manual_timer: ManualTimerAdapter) -> None:
        debounced = debounce(Recorder(), 100, timer=manual_timer)
        debounced.cancel()
        assert not debounced.pending

    def test_usable_after_cancel(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        debounced(1)
        debounced.cancel()
        debounced(2)
        manual_timer.advance(100)
        assert recorder.calls == [((2,), {})]

    def test_pending_clears_after_run(
        self, recorder: Recorder, manual_timer: ManualTimerAdapter
    ) -> None:
        debounced = debounce(recorder, 100, timer=manual_timer)
        debounced()
        manual_timer.advance(100)
        assert not debounced.pending


class TestSupersededTimer:
    """A timer that fires after being superseded must not run the call."""

    def test_stale_callback_ignored(self, recorder: Recorder) -> None:
        callbacks = []

        class LeakyTimer:
            """Timer whose cancel() cannot stop an already-firing callback."""

            def schedule(self, delay_seconds, callback):
                callbacks.append(callback)

                class Handle:
                    def cancel(self) -> None:
                        pass

                return Handle()

        debounced = debounce(recorder, 100, timer=LeakyTimer())
        debounced("old")
        debounced("new")

        callbacks[0]()
        assert recorder.calls == []
        callbacks[1]()
        assert recorder.calls == [(("new",), {})]


class TestErrors:
    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            debounce(Recorder(), -1)

    def test_callback_error_propagates_from_manual_timer(
        self, manual_timer: ManualTimerAdapter
    ) -> None:
        def boom() -> None:
            raise RuntimeError("boom")

        debounced = debounce(boom, 10, timer=manual_timer)
        debounced()
        with pytest.raises(RuntimeError, match="boom"):
            manual_timer.advance(10)
        assert not debounced.pending


class TestCreateDebouncer:
    def test_delay_from_project_rules(self, rules_port: RulesAdapter) -> None:
        debounced = create_debouncer(Recorder(), rules=rules_port)
        assert debounced.delay_ms == 300

    def test_delay_from_custom_rules(self, manual_timer: ManualTimerAdapter) -> None:
        recorder = Recorder()
        port = RulesAdapter(DashRules(debounce=DebounceRules(default_delay_ms=50)))
        debounced = create_debouncer(recorder, rules=port, timer=manual_timer)
        debounced()
        manual_timer.advance(49)
        assert recorder.calls == []
        manual_timer.advance(1)
        assert len(recorder.calls) == 1

    def test_explicit_delay_overrides_rules(self, rules_port: RulesAdapter) -> None:
        debounced = create_debouncer(Recorder(), rules=rules_port, delay_ms=10)
        assert debounced.delay_ms == 10

    def test_default_without_rules(self) -> None:
        assert create_debouncer(Recorder()).delay_ms == DEFAULT_DELAY_MS
