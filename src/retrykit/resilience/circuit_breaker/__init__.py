"""Resilience – CLOSED/OPEN circuit breaker and its threshold strategies."""
from retrykit.resilience.circuit_breaker.state import CircuitStatus
from retrykit.resilience.circuit_breaker.strategies import (
    BreakerStrategy,
    ConsecutiveThreshold,
    SimpleThreshold,
    TimeBucketThreshold,
)
from retrykit.resilience.circuit_breaker.policy import CircuitBreakerPolicy
from retrykit.resilience.circuit_breaker.breaker import CircuitBreaker

__all__ = [
    "BreakerStrategy",
    "CircuitBreaker",
    "CircuitBreakerPolicy",
    "CircuitStatus",
    "ConsecutiveThreshold",
    "SimpleThreshold",
    "TimeBucketThreshold",
]
