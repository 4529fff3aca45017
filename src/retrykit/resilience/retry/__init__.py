"""Resilience – retry engines with pluggable sleep policies."""
from retrykit.resilience.retry.context import ExecutionContext
from retrykit.resilience.retry.policy import (
    FailureHandler,
    FixedRetry,
    ForeverRetry,
    RetryEngine,
    RetryHandler,
    RetryPolicy,
    TimeBasedRetry,
)
from retrykit.resilience.retry.sleep import NO_WAIT, SleepFunc, SleepFunction, SleepPolicy, SleepSequence

__all__ = [
    "NO_WAIT", "ExecutionContext", "FailureHandler", "FixedRetry", "ForeverRetry",
    "RetryEngine", "RetryHandler", "RetryPolicy", "SleepFunc", "SleepFunction",
    "SleepPolicy", "SleepSequence", "TimeBasedRetry",
]
