"""Kernel time – Clock port for deadlines, cooldowns and time buckets.

Every time-dependent decision in the engines reads POSIX seconds from a
:class:`Clock`, so tests can pin and step time instead of sleeping.
"""
from __future__ import annotations

import time
from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: wall-clock seconds since the epoch."""

    def timestamp(self) -> float: ...


class SystemClock:
    """Production clock backed by ``time.time()``."""

    def timestamp(self) -> float:
        return time.time()


class FrozenClock:
    """Clock that only moves when told to.

    *start* is a POSIX timestamp or an aware ``datetime``.
    """

    def __init__(self, start: float | datetime = 0.0) -> None:
        self._seconds = start.timestamp() if isinstance(start, datetime) else float(start)

    def timestamp(self) -> float:
        return self._seconds

    def advance(self, **kwargs: float) -> None:
        """Step forward by ``timedelta(**kwargs)``, e.g. ``advance(seconds=1.5)``."""
        self._seconds += timedelta(**kwargs).total_seconds()

    def __repr__(self) -> str:
        return f"FrozenClock({self._seconds!r})"


__all__ = ["Clock", "FrozenClock", "SystemClock"]
