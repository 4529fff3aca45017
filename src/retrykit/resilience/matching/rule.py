"""Resilience – RetryableException rule and OR-combination."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable

from retrykit.config.validation import InvalidSettingValueError


def _always(_: BaseException) -> bool:
    return True


@dataclasses.dataclass(frozen=True)
class RetryableException:
    """Selects failures of *exc_type* (subclasses included) accepted by *condition*.

    "Handle X only if ..." is expressed through *condition*; "handle X or Y"
    is expressed by a second rule. Rules are never AND-combined.
    """

    exc_type: type[BaseException]
    condition: Callable[[Any], bool] = _always

    def __post_init__(self) -> None:
        if not (isinstance(self.exc_type, type) and issubclass(self.exc_type, BaseException)):
            raise InvalidSettingValueError("exc_type", self.exc_type, "must be an exception class")

    def match(self, exc: BaseException) -> bool:
        if not isinstance(exc, self.exc_type):
            return False
        return bool(self.condition(exc))


def match_any(rules: Iterable[RetryableException], exc: BaseException) -> bool:
    """``True`` if at least one rule matches *exc*."""
    return any(rule.match(exc) for rule in rules)


__all__ = ["RetryableException", "match_any"]
