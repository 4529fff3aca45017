"""Resilience – ConsecutiveThreshold strategy."""
from __future__ import annotations

from retrykit.resilience.circuit_breaker.strategies.base import BreakerStrategy, require_threshold


class ConsecutiveThreshold(BreakerStrategy):
    """Open only after *threshold* back-to-back failures.

    A single success breaks the streak. The counting rule is the same as
    :class:`SimpleThreshold`; the two are kept apart so configurations state
    their intent.
    """

    def __init__(self, threshold: int) -> None:
        self.threshold = require_threshold(threshold)
        self._streak = 0

    @property
    def consecutive_error_count(self) -> int:
        return self._streak

    def on_failure(self, exc: BaseException) -> bool:  # noqa: ARG002
        self._streak += 1
        if self._streak >= self.threshold:
            self._streak = 0
            return True
        return False

    def on_success(self) -> None:
        self._streak = 0

    def reset(self) -> None:
        self._streak = 0

    def __repr__(self) -> str:
        return f"ConsecutiveThreshold(threshold={self.threshold}, streak={self._streak})"


__all__ = ["ConsecutiveThreshold"]
