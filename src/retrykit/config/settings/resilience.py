"""Config settings – defaults consumed by the policy builder."""
from __future__ import annotations

import dataclasses
import logging

from retrykit.config.settings.base import Settings
from retrykit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ResilienceSettings(Settings):
    """Library-wide defaults.

    Nothing in the retry or breaker engines reads these implicitly; callers
    load them (e.g. via :class:`EnvSettingsLoader`) and hand them to
    :class:`~retrykit.resilience.builder.PolicyBuilder`.
    """

    _prefix = "retrykit"

    default_sleep_seconds: float = 0.0
    default_cooldown_seconds: float = 30.0
    log_level: str = "INFO"

    def _validate(self) -> None:
        self._require_non_negative("default_sleep_seconds", "default_cooldown_seconds")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["ResilienceSettings"]
