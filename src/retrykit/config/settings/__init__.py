"""Config settings – 12-factor env-based configuration."""
from retrykit.config.settings.base import Settings
from retrykit.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from retrykit.config.settings.resilience import ResilienceSettings

__all__ = ["EnvSettingsLoader", "ResilienceSettings", "Settings", "SettingsLoader"]
