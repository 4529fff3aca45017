"""Resilience – exception matching, retry engines, circuit breaker, builder."""

from retrykit.resilience.circuit_breaker import (
    BreakerStrategy,
    CircuitBreaker,
    CircuitBreakerPolicy,
    CircuitStatus,
    ConsecutiveThreshold,
    SimpleThreshold,
    TimeBucketThreshold,
)
from retrykit.resilience.matching import RetryableException, match_any
from retrykit.resilience.retry import (
    ExecutionContext,
    FixedRetry,
    ForeverRetry,
    RetryEngine,
    RetryPolicy,
    SleepFunction,
    SleepPolicy,
    SleepSequence,
    TimeBasedRetry,
)
from retrykit.resilience.builder import Policy, PolicyBuilder

__all__ = [
    "BreakerStrategy",
    "CircuitBreaker",
    "CircuitBreakerPolicy",
    "CircuitStatus",
    "ConsecutiveThreshold",
    "ExecutionContext",
    "FixedRetry",
    "ForeverRetry",
    "Policy",
    "PolicyBuilder",
    "RetryEngine",
    "RetryPolicy",
    "RetryableException",
    "SleepFunction",
    "SleepPolicy",
    "SleepSequence",
    "SimpleThreshold",
    "TimeBasedRetry",
    "TimeBucketThreshold",
    "match_any",
]
