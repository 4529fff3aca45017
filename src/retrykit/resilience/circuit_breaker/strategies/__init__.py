"""Resilience – breaker strategies deciding when a circuit must open."""
from retrykit.resilience.circuit_breaker.strategies.base import BreakerStrategy
from retrykit.resilience.circuit_breaker.strategies.consecutive import ConsecutiveThreshold
from retrykit.resilience.circuit_breaker.strategies.simple import SimpleThreshold
from retrykit.resilience.circuit_breaker.strategies.time_bucket import TimeBucketThreshold

__all__ = ["BreakerStrategy", "ConsecutiveThreshold", "SimpleThreshold", "TimeBucketThreshold"]
