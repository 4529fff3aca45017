"""Resilience – fluent builder assembling retry engines and circuit breakers.

Example::

    from datetime import timedelta
    from retrykit import Policy

    fetch_with_retry = (
        Policy.handle(HttpError, lambda e: e.status == 500)
        .or_(ConnectionError)
        .on_retry(lambda exc, ctx: log.info("retrying", attempt=ctx.attempt))
        .sleep([0.1, 0.2, 0.4])
        .retry(5)
    )
    body = fetch_with_retry(lambda: client.get("/items"), recover=lambda: [])

    breaker = Policy.handle(ConnectionError).threshold_circuit_breaker(3, timedelta(seconds=30))
    body = breaker(lambda: client.get("/items"), lambda: [])
"""
from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, Callable, Sequence

from retrykit.config.settings import ResilienceSettings
from retrykit.kernel.time import Clock, SystemClock
from retrykit.resilience.circuit_breaker import (
    BreakerStrategy,
    CircuitBreaker,
    CircuitBreakerPolicy,
    ConsecutiveThreshold,
    SimpleThreshold,
    TimeBucketThreshold,
)
from retrykit.resilience.matching import RetryableException
from retrykit.resilience.retry import (
    FailureHandler,
    FixedRetry,
    ForeverRetry,
    RetryHandler,
    RetryPolicy,
    SleepFunc,
    SleepFunction,
    SleepPolicy,
    SleepSequence,
    TimeBasedRetry,
)

Duration = float | timedelta


def to_seconds(duration: Duration) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


class PolicyBuilder:
    """Mutable accumulator of policy inputs; terminal methods build immutable engines."""

    def __init__(self, settings: ResilienceSettings | None = None) -> None:
        self._settings = settings or ResilienceSettings()
        self._exceptions: list[RetryableException] = []
        self._on_retry: RetryHandler | None = None
        self._on_failure: FailureHandler | None = None
        self._sleep: SleepPolicy = SleepSequence.constant(self._settings.default_sleep_seconds)
        self._sleeper: Callable[[float], Any] = time.sleep
        self._clock: Clock = SystemClock()

    @classmethod
    def handle(
        cls,
        exc_type: type[BaseException],
        condition: Callable[[Any], bool] | None = None,
        *,
        settings: ResilienceSettings | None = None,
    ) -> "PolicyBuilder":
        """Start a builder reacting to *exc_type* (and its subclasses)."""
        return cls(settings).or_(exc_type, condition)

    # ------------------------------------------------------------------
    # Accumulators
    # ------------------------------------------------------------------

    def or_(
        self,
        exc_type: type[BaseException],
        condition: Callable[[Any], bool] | None = None,
    ) -> "PolicyBuilder":
        if condition is None:
            self._exceptions.append(RetryableException(exc_type))
        else:
            self._exceptions.append(RetryableException(exc_type, condition))
        return self

    def on_retry(self, handler: RetryHandler) -> "PolicyBuilder":
        self._on_retry = handler
        return self

    def on_failure(self, handler: FailureHandler) -> "PolicyBuilder":
        self._on_failure = handler
        return self

    def sleep(self, seconds: Duration | Sequence[Duration]) -> "PolicyBuilder":
        """Fixed wait, or a list of waits whose last entry repeats."""
        if isinstance(seconds, (int, float, timedelta)):
            self._sleep = SleepSequence.constant(to_seconds(seconds))
        else:
            self._sleep = SleepSequence([to_seconds(s) for s in seconds])
        return self

    def sleep_func(self, func: SleepFunc) -> "PolicyBuilder":
        """Compute each wait as ``func(attempt, previous_wait)``."""
        self._sleep = SleepFunction(func)
        return self

    def with_sleeper(self, sleeper: Callable[[float], Any]) -> "PolicyBuilder":
        self._sleeper = sleeper
        return self

    def with_clock(self, clock: Clock) -> "PolicyBuilder":
        self._clock = clock
        return self

    def build_policy(self) -> RetryPolicy:
        kwargs: dict[str, Any] = {"sleep": self._sleep, "sleeper": self._sleeper}
        if self._on_retry is not None:
            kwargs["on_retry"] = self._on_retry
        if self._on_failure is not None:
            kwargs["on_failure"] = self._on_failure
        return RetryPolicy(tuple(self._exceptions), **kwargs)

    # ------------------------------------------------------------------
    # Retry terminals
    # ------------------------------------------------------------------

    def retry(self, max_attempts: int) -> FixedRetry:
        return FixedRetry(self.build_policy(), max_attempts)

    def forever(self) -> ForeverRetry:
        return ForeverRetry(self.build_policy())

    def time(self, duration: Duration) -> TimeBasedRetry:
        return TimeBasedRetry(self.build_policy(), to_seconds(duration), clock=self._clock)

    # ------------------------------------------------------------------
    # Circuit-breaker terminals
    # ------------------------------------------------------------------

    def circuit_breaker(
        self,
        strategy: BreakerStrategy,
        cooldown: Duration | None = None,
        name: str = "circuit-breaker",
    ) -> CircuitBreaker:
        cooldown_seconds = (
            self._settings.default_cooldown_seconds if cooldown is None else to_seconds(cooldown)
        )
        policy = CircuitBreakerPolicy(
            retry=self.build_policy(),
            strategy=strategy,
            cooldown_seconds=cooldown_seconds,
        )
        return CircuitBreaker(policy, name=name, clock=self._clock)

    def threshold_circuit_breaker(self, threshold: int, cooldown: Duration | None = None) -> CircuitBreaker:
        return self.circuit_breaker(SimpleThreshold(threshold), cooldown)

    def consecutive_threshold_circuit_breaker(
        self, threshold: int, cooldown: Duration | None = None
    ) -> CircuitBreaker:
        return self.circuit_breaker(ConsecutiveThreshold(threshold), cooldown)

    def time_bucket_circuit_breaker(
        self,
        bucket_duration: Duration,
        threshold: int,
        cooldown: Duration | None = None,
    ) -> CircuitBreaker:
        strategy = TimeBucketThreshold(to_seconds(bucket_duration), threshold, clock=self._clock)
        return self.circuit_breaker(strategy, cooldown)


class Policy:
    """Entry point: ``Policy.handle(SomeError)`` starts a :class:`PolicyBuilder`."""

    handle = PolicyBuilder.handle


__all__ = ["Policy", "PolicyBuilder", "to_seconds"]
