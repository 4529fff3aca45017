"""Resilience – sleep policies (wait duration between attempts)."""
from __future__ import annotations

import abc
from typing import Callable, Sequence

from retrykit.config.validation import InvalidSettingValueError

SleepFunc = Callable[[int, float], float]


class SleepPolicy(abc.ABC):
    """Compute the wait (seconds) after the *attempt*-th matched failure.

    *attempt* is 1-based; *previous_wait* is ``0.0`` before the first wait and
    afterwards the value this policy returned last.
    """

    @abc.abstractmethod
    def next_wait(self, attempt: int, previous_wait: float) -> float: ...


class SleepSequence(SleepPolicy):
    """Fixed list of waits; the last one is reused once the list runs out."""

    def __init__(self, waits: Sequence[float]) -> None:
        for wait in waits:
            if wait < 0:
                raise InvalidSettingValueError("sleep", list(waits), "waits must be >= 0")
        self._waits = tuple(float(w) for w in waits)

    @classmethod
    def constant(cls, seconds: float) -> "SleepSequence":
        return cls([seconds])

    @property
    def waits(self) -> tuple[float, ...]:
        return self._waits

    def next_wait(self, attempt: int, previous_wait: float) -> float:  # noqa: ARG002
        if not self._waits:
            return 0.0
        index = attempt - 1
        if index < len(self._waits):
            return self._waits[index]
        return self._waits[-1]

    def __repr__(self) -> str:
        return f"SleepSequence({list(self._waits)!r})"


class SleepFunction(SleepPolicy):
    """Delegate to ``func(attempt, previous_wait)``, evaluated on every retry.

    Example – double the previous wait, capped at 8 seconds::

        SleepFunction(lambda n, prev: 0.5 if n == 1 else min(prev * 2, 8.0))
    """

    def __init__(self, func: SleepFunc) -> None:
        if not callable(func):
            raise InvalidSettingValueError("sleep_func", func, "must be callable")
        self._func = func

    def next_wait(self, attempt: int, previous_wait: float) -> float:
        return max(0.0, float(self._func(attempt, previous_wait)))


NO_WAIT = SleepSequence.constant(0.0)

__all__ = ["NO_WAIT", "SleepFunc", "SleepFunction", "SleepPolicy", "SleepSequence"]
