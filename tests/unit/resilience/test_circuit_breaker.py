"""Unit tests for CircuitBreaker state transitions."""

from __future__ import annotations

import threading
from typing import Callable

import pytest

from retrykit.config.validation import InvalidSettingValueError
from retrykit.kernel.time import FrozenClock
from retrykit.resilience.circuit_breaker import (
    BreakerStrategy,
    CircuitBreaker,
    CircuitBreakerPolicy,
    CircuitStatus,
    ConsecutiveThreshold,
    SimpleThreshold,
    TimeBucketThreshold,
)
from retrykit.resilience.matching import RetryableException
from retrykit.resilience.retry import ExecutionContext, RetryPolicy, SleepSequence
from retrykit.testing import FakeSleeper


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class Action:
    """Callable that raises the queued outcomes in order, then returns ``"ok"``."""

    def __init__(self, *outcomes: BaseException) -> None:
        self._outcomes = list(outcomes)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if self._outcomes:
            raise self._outcomes.pop(0)
        return "ok"


class RecordingStrategy(BreakerStrategy):
    """Delegating strategy that logs every signal it receives."""

    def __init__(self, inner: BreakerStrategy) -> None:
        self._inner = inner
        self.signals: list[str] = []

    def on_failure(self, exc: BaseException) -> bool:
        self.signals.append("failure")
        return self._inner.on_failure(exc)

    def on_success(self) -> None:
        self.signals.append("success")
        self._inner.on_success()

    def reset(self) -> None:
        self.signals.append("reset")
        self._inner.reset()


class AlwaysFails:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        raise OSError("unavailable")


def make_breaker(
    strategy: BreakerStrategy,
    clock: FrozenClock,
    workflow: list[str] | None = None,
    *,
    cooldown: float = 10.0,
    sleeper: Callable[[float], object] | None = None,
    wait: float = 0.0,
) -> CircuitBreaker:
    events = workflow if workflow is not None else []
    kwargs = {"sleeper": sleeper} if sleeper is not None else {}
    policy = RetryPolicy(
        exceptions=(RetryableException(OSError),),
        on_retry=lambda exc, ctx: events.append("R"),
        on_failure=lambda exc: events.append("F"),
        sleep=SleepSequence.constant(wait),
        **kwargs,
    )
    return CircuitBreaker(
        CircuitBreakerPolicy(retry=policy, strategy=strategy, cooldown_seconds=cooldown),
        name="test",
        clock=clock,
    )


def fallback() -> str:
    return "fallback"


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


class TestCircuitBreakerPolicy:
    def test_negative_cooldown_rejected(self) -> None:
        retry = RetryPolicy(exceptions=(RetryableException(OSError),))
        with pytest.raises(InvalidSettingValueError):
            CircuitBreakerPolicy(retry=retry, strategy=SimpleThreshold(1), cooldown_seconds=-1)

    def test_default_cooldown(self) -> None:
        retry = RetryPolicy(exceptions=(RetryableException(OSError),))
        assert CircuitBreakerPolicy(retry=retry, strategy=SimpleThreshold(1)).cooldown_seconds == 30.0


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


class TestCircuitBreakerTransitions:
    def test_starts_closed(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(3), fake_clock)
        assert cb.status == CircuitStatus.CLOSED
        assert cb.opened_at is None
        assert cb.name == "test"

    def test_success_passes_value_through(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(3), fake_clock)
        assert cb(Action(), fallback) == "ok"

    def test_opens_after_threshold(self, fake_clock: FrozenClock) -> None:
        workflow: list[str] = []
        cb = make_breaker(SimpleThreshold(3), fake_clock, workflow)
        action = AlwaysFails()

        assert cb(action, fallback) == "fallback"
        assert action.calls == 3
        assert workflow == ["R", "R", "R"]
        assert cb.status == CircuitStatus.OPEN
        assert cb.opened_at == fake_clock.timestamp()

    def test_open_circuit_short_circuits(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(1), fake_clock)
        cb(AlwaysFails(), fallback)

        action = Action()
        assert cb(action, fallback) == "fallback"
        assert action.calls == 0

    @pytest.mark.parametrize(
        "strategy_cls",
        [SimpleThreshold, ConsecutiveThreshold],
        ids=["simple", "consecutive"],
    )
    def test_open_circuit_leaves_strategy_untouched(
        self, fake_clock: FrozenClock, strategy_cls: type[SimpleThreshold]
    ) -> None:
        recording = RecordingStrategy(strategy_cls(2))
        cb = make_breaker(recording, fake_clock)
        cb(AlwaysFails(), fallback)
        assert cb.status == CircuitStatus.OPEN
        signals = list(recording.signals)

        for action in (AlwaysFails(), Action()):
            assert cb(action, fallback) == "fallback"

        assert recording.signals == signals

    def test_open_circuit_leaves_bucket_untouched(self, fake_clock: FrozenClock) -> None:
        strategy = TimeBucketThreshold(10.0, 1, clock=fake_clock)
        cb = make_breaker(strategy, fake_clock, cooldown=30.0)
        cb(AlwaysFails(), fallback)
        bucket = strategy.bucket

        fake_clock.advance(seconds=15)
        cb(AlwaysFails(), fallback)

        assert strategy.bucket == bucket
        assert strategy.count_in_bucket == 1

    def test_stays_open_until_cooldown_elapsed(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(1), fake_clock, cooldown=10.0)
        cb(AlwaysFails(), fallback)

        fake_clock.advance(seconds=9.9)
        action = Action()
        assert cb(action, fallback) == "fallback"
        assert action.calls == 0
        assert cb.status == CircuitStatus.OPEN

    def test_closes_after_cooldown(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(1), fake_clock, cooldown=10.0)
        cb(AlwaysFails(), fallback)

        fake_clock.advance(seconds=10)
        assert cb(Action(), fallback) == "ok"
        assert cb.status == CircuitStatus.CLOSED
        assert cb.opened_at is None

    def test_zero_cooldown_closes_on_next_call(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(1), fake_clock, cooldown=0.0)
        cb(AlwaysFails(), fallback)
        assert cb.status == CircuitStatus.OPEN

        assert cb(Action(), fallback) == "ok"
        assert cb.status == CircuitStatus.CLOSED

    def test_closed_circuit_counts_from_zero(self, fake_clock: FrozenClock) -> None:
        strategy = SimpleThreshold(2)
        cb = make_breaker(strategy, fake_clock, cooldown=5.0)
        cb(AlwaysFails(), fallback)
        fake_clock.advance(seconds=5)

        action = Action(OSError("once"))
        assert cb(action, fallback) == "ok"
        assert cb.status == CircuitStatus.CLOSED
        assert strategy.error_count == 0

    def test_reopens_after_closing(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(2), fake_clock, cooldown=5.0)
        cb(AlwaysFails(), fallback)
        fake_clock.advance(seconds=5)

        action = AlwaysFails()
        assert cb(action, fallback) == "fallback"
        assert action.calls == 2
        assert cb.opened_at == fake_clock.timestamp()


# ---------------------------------------------------------------------------
# Strategies wired into the breaker
# ---------------------------------------------------------------------------


class TestCircuitBreakerStrategies:
    def test_consecutive_streak_broken_by_success(self, fake_clock: FrozenClock) -> None:
        workflow: list[str] = []
        cb = make_breaker(ConsecutiveThreshold(2), fake_clock, workflow)

        for _ in range(3):
            assert cb(Action(OSError("flaky")), fallback) == "ok"

        assert "".join(workflow) == "RRR"
        assert cb.status == CircuitStatus.CLOSED

    def test_consecutive_opens_on_streak(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(ConsecutiveThreshold(2), fake_clock)
        action = Action(OSError("a"), OSError("b"))
        assert cb(action, fallback) == "fallback"
        assert action.calls == 2
        assert cb.status == CircuitStatus.OPEN

    def test_time_bucket_opens_within_window(self, fake_clock: FrozenClock) -> None:
        sleeper = FakeSleeper(fake_clock)
        cb = make_breaker(
            TimeBucketThreshold(10.0, 3, clock=fake_clock),
            fake_clock,
            sleeper=sleeper,
            wait=2.0,
        )
        action = AlwaysFails()

        assert cb(action, fallback) == "fallback"
        assert action.calls == 3
        assert cb.status == CircuitStatus.OPEN

    def test_time_bucket_failures_spread_across_windows(self, fake_clock: FrozenClock) -> None:
        sleeper = FakeSleeper(fake_clock)
        cb = make_breaker(
            TimeBucketThreshold(10.0, 3, clock=fake_clock),
            fake_clock,
            sleeper=sleeper,
            wait=6.0,
        )
        action = Action(*(OSError(str(i)) for i in range(4)))

        assert cb(action, fallback) == "ok"
        assert action.calls == 5
        assert cb.status == CircuitStatus.CLOSED


# ---------------------------------------------------------------------------
# Recovery and callbacks
# ---------------------------------------------------------------------------


class TestCircuitBreakerRecovery:
    def test_unmatched_failure_recovers_without_failure_callback(self, fake_clock: FrozenClock) -> None:
        workflow: list[str] = []
        cb = make_breaker(SimpleThreshold(3), fake_clock, workflow)

        assert cb(Action(ValueError("bad input")), fallback) == "fallback"
        assert workflow == []
        assert cb.status == CircuitStatus.CLOSED

    def test_unmatched_failure_is_not_counted_as_success(self, fake_clock: FrozenClock) -> None:
        strategy = SimpleThreshold(2)
        cb = make_breaker(strategy, fake_clock)

        cb(Action(OSError("down"), ValueError("bad input")), fallback)
        assert strategy.error_count == 1

        cb(Action(OSError("down again")), fallback)
        assert cb.status == CircuitStatus.OPEN

    def test_failure_callback_never_fires(self, fake_clock: FrozenClock) -> None:
        workflow: list[str] = []
        cb = make_breaker(SimpleThreshold(2), fake_clock, workflow)
        cb(AlwaysFails(), fallback)
        cb(AlwaysFails(), fallback)
        assert "F" not in workflow

    def test_caller_cancel_recovers_without_opening(self, fake_clock: FrozenClock) -> None:
        def cancel(exc: BaseException, ctx: ExecutionContext) -> None:
            ctx.cancel()

        policy = RetryPolicy(exceptions=(RetryableException(OSError),), on_retry=cancel)
        cb = CircuitBreaker(
            CircuitBreakerPolicy(retry=policy, strategy=SimpleThreshold(5)),
            clock=fake_clock,
        )
        action = AlwaysFails()

        assert cb(action, fallback) == "fallback"
        assert action.calls == 1
        assert cb.status == CircuitStatus.CLOSED

    def test_sleeps_between_closed_retries(self, fake_clock: FrozenClock) -> None:
        sleeper = FakeSleeper(fake_clock)
        cb = make_breaker(SimpleThreshold(3), fake_clock, sleeper=sleeper, wait=0.25)
        cb(Action(OSError("a"), OSError("b")), fallback)
        assert sleeper.waits == [0.25, 0.25]

    def test_recover_exception_propagates(self, fake_clock: FrozenClock) -> None:
        cb = make_breaker(SimpleThreshold(1), fake_clock)

        def broken_recover() -> str:
            raise LookupError("no cached value")

        with pytest.raises(LookupError):
            cb(AlwaysFails(), broken_recover)


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestCircuitBreakerConcurrency:
    def test_concurrent_failures_are_all_counted(self, fake_clock: FrozenClock) -> None:
        threshold = 40
        workers = 8
        failures: list[int] = []
        results: list[str] = []
        cb = make_breaker(SimpleThreshold(threshold), fake_clock)
        admitted = threading.Barrier(workers)
        seen = threading.local()

        def action() -> str:
            if not getattr(seen, "entered", False):
                seen.entered = True
                admitted.wait(timeout=5)
            failures.append(1)
            raise OSError("unavailable")

        def run() -> None:
            results.append(cb(action, fallback))

        threads = [threading.Thread(target=run) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == ["fallback"] * workers
        assert len(failures) == threshold * workers
        assert cb.status == CircuitStatus.OPEN
