"""Config validation errors.

Raised at construction time by settings, policies, strategies and engines.
The offending setting travels in ``detail`` so it shows up in log records.
"""
from retrykit.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required setting or policy input was not supplied."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", setting=setting_name)
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting or policy input is outside its allowed range."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting=setting_name,
            value=repr(value),
            reason=reason,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
