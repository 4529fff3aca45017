"""Resilience – CircuitStatus enum."""
from __future__ import annotations
from enum import Enum


class CircuitStatus(str, Enum):
    CLOSED = "CLOSED"
    OPEN = "OPEN"


__all__ = ["CircuitStatus"]
