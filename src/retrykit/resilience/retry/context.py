"""Resilience – per-invocation ExecutionContext."""
from __future__ import annotations


class ExecutionContext:
    """Mutable state of one engine invocation.

    Passed to every retry callback; calling :meth:`cancel` stops the loop
    after the callback returns and re-raises the triggering failure.
    """

    __slots__ = ("_attempt", "_cancelled")

    def __init__(self) -> None:
        self._attempt = 0
        self._cancelled = False

    @property
    def attempt(self) -> int:
        """1-based index of the failed attempt being handled; 0 before the first failure."""
        return self._attempt

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def _set_attempt(self, attempt: int) -> None:
        self._attempt = attempt

    def __repr__(self) -> str:
        return f"ExecutionContext(attempt={self._attempt}, cancelled={self._cancelled})"


__all__ = ["ExecutionContext"]
