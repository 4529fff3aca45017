"""
retrykit – retry, backoff and circuit-breaker policies for fallible operations.

Import path convention::

    from retrykit import Policy
    from retrykit.resilience.retry import FixedRetry, RetryPolicy
    from retrykit.resilience.circuit_breaker import CircuitBreaker, SimpleThreshold
"""

from retrykit.resilience.builder import Policy, PolicyBuilder

__version__ = "0.1.0"
__all__ = ["Policy", "PolicyBuilder", "__version__"]
