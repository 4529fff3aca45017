"""Resilience – exception matching rules."""
from retrykit.resilience.matching.rule import RetryableException, match_any

__all__ = ["RetryableException", "match_any"]
