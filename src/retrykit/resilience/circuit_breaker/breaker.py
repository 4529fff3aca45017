"""Resilience – CircuitBreaker implementation."""
from __future__ import annotations

import dataclasses
import threading
from typing import Any, Callable, TypeVar

from retrykit.kernel.time import Clock, SystemClock
from retrykit.observability.logging import get_logger
from retrykit.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from retrykit.resilience.circuit_breaker.state import CircuitStatus
from retrykit.resilience.retry import ExecutionContext, ForeverRetry

T = TypeVar("T")
logger = get_logger(__name__)

_RECOVERED: Any = object()


def _recovered() -> Any:
    return _RECOVERED


class CircuitBreaker:
    """CLOSED/OPEN circuit breaker wrapping an unbounded retry loop.

    While CLOSED, calls go through a :class:`ForeverRetry`; every matched
    failure is reported to the strategy, and once it asks to open the circuit
    the loop is cancelled. While OPEN, calls return ``recover()`` without
    touching the action. The first call after the cooldown resets the
    strategy and closes the circuit.

    Status, ``opened_at`` and the strategy counters are updated under one
    lock; actions, callbacks and sleeps run outside it.
    """

    def __init__(
        self,
        policy: CircuitBreakerPolicy,
        name: str = "circuit-breaker",
        clock: Clock | None = None,
    ) -> None:
        self.name = name
        self._policy = policy
        self._strategy = policy.strategy
        self._clock = clock or SystemClock()
        self._status = CircuitStatus.CLOSED
        self._opened_at: float | None = None
        self._lock = threading.Lock()
        self._retry = ForeverRetry(dataclasses.replace(policy.retry, on_retry=self._on_retry))

    @property
    def policy(self) -> CircuitBreakerPolicy:
        return self._policy

    @property
    def status(self) -> CircuitStatus:
        return self._status

    @property
    def opened_at(self) -> float | None:
        return self._opened_at

    def __call__(self, action: Callable[[], T], recover: Callable[[], T]) -> T:
        if not self._admit():
            logger.debug("circuit_breaker.short_circuit", name=self.name)
            return recover()

        try:
            result = self._retry(action, recover=_recovered)
        except Exception:
            return recover()

        if result is _RECOVERED:
            return recover()

        with self._lock:
            self._strategy.on_success()
        return result

    def _admit(self) -> bool:
        with self._lock:
            if (
                self._status == CircuitStatus.OPEN
                and self._opened_at is not None
                and self._clock.timestamp() >= self._opened_at + self._policy.cooldown_seconds
            ):
                self._strategy.reset()
                self._status = CircuitStatus.CLOSED
                self._opened_at = None
                logger.info("circuit_breaker.closed", name=self.name)
            return self._status == CircuitStatus.CLOSED

    def _on_retry(self, exc: BaseException, context: ExecutionContext) -> None:
        self._policy.retry.on_retry(exc, context)
        with self._lock:
            must_open = self._strategy.on_failure(exc)
            logger.debug(
                "circuit_breaker.failure",
                name=self.name, attempt=context.attempt, exc=repr(exc),
            )
            if must_open:
                self._opened_at = self._clock.timestamp()
                self._status = CircuitStatus.OPEN
        if must_open:
            logger.warning(
                "circuit_breaker.opened",
                name=self.name, cooldown_seconds=self._policy.cooldown_seconds,
            )
            context.cancel()


__all__ = ["CircuitBreaker"]
