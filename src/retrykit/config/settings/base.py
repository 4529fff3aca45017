"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses

from retrykit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and override :meth:`_validate`, which runs on
    every construction, whether direct or through a loader.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``RETRYKIT_LOG_LEVEL``."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _require_non_negative(self, *field_names: str) -> None:
        for name in field_names:
            value = getattr(self, name)
            if value < 0:
                raise InvalidSettingValueError(name, value, "must be >= 0")


__all__ = ["Settings"]
