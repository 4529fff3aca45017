"""Resilience – BreakerStrategy port."""
from __future__ import annotations

import abc

from retrykit.config.validation import InvalidSettingValueError


class BreakerStrategy(abc.ABC):
    """Consumes success/failure signals and decides whether to open the circuit.

    Strategy state is owned by exactly one :class:`CircuitBreaker`, which
    serialises every call to these methods.
    """

    @abc.abstractmethod
    def on_failure(self, exc: BaseException) -> bool:
        """Record a failure; return ``True`` if the circuit must open."""

    @abc.abstractmethod
    def on_success(self) -> None:
        """Record a successful call."""

    @abc.abstractmethod
    def reset(self) -> None:
        """Return to the zero state (called when the circuit closes again)."""


def require_threshold(threshold: int) -> int:
    if threshold < 1:
        raise InvalidSettingValueError("threshold", threshold, "must be >= 1")
    return threshold


__all__ = ["BreakerStrategy", "require_threshold"]
