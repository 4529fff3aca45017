"""Resilience – SimpleThreshold strategy."""
from __future__ import annotations

from retrykit.resilience.circuit_breaker.strategies.base import BreakerStrategy, require_threshold


class SimpleThreshold(BreakerStrategy):
    """Open after *threshold* failures; any success forgives all prior failures."""

    def __init__(self, threshold: int) -> None:
        self.threshold = require_threshold(threshold)
        self._error_count = 0

    @property
    def error_count(self) -> int:
        return self._error_count

    def on_failure(self, exc: BaseException) -> bool:  # noqa: ARG002
        self._error_count += 1
        if self._error_count >= self.threshold:
            self._error_count = 0
            return True
        return False

    def on_success(self) -> None:
        self._error_count = 0

    def reset(self) -> None:
        self._error_count = 0

    def __repr__(self) -> str:
        return f"SimpleThreshold(threshold={self.threshold}, error_count={self._error_count})"


__all__ = ["SimpleThreshold"]
