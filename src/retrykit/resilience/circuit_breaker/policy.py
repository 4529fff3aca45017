"""Resilience – CircuitBreakerPolicy."""
from __future__ import annotations

import dataclasses

from retrykit.config.validation import InvalidSettingValueError
from retrykit.resilience.circuit_breaker.strategies import BreakerStrategy
from retrykit.resilience.retry import RetryPolicy


@dataclasses.dataclass(frozen=True)
class CircuitBreakerPolicy:
    """Configuration for a circuit breaker.

    *retry* drives the attempts made while the circuit is closed;
    *strategy* decides when it opens; *cooldown_seconds* is how long it stays
    open before the next call closes it again.
    """
    retry: RetryPolicy
    strategy: BreakerStrategy
    cooldown_seconds: float = 30.0

    def __post_init__(self) -> None:
        if self.cooldown_seconds < 0:
            raise InvalidSettingValueError("cooldown_seconds", self.cooldown_seconds, "must be >= 0")


__all__ = ["CircuitBreakerPolicy"]
