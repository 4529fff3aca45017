"""Config – dataclass settings, env loader, and configuration errors."""

from retrykit.config.settings import EnvSettingsLoader, ResilienceSettings, Settings, SettingsLoader
from retrykit.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ResilienceSettings",
    "Settings",
    "SettingsLoader",
]
