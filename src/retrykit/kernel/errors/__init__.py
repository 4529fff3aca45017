"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        └── ConfigError      (retrykit.config.validation)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError

Failures raised by user actions are never wrapped in these classes; the
retry engines re-raise the original exception object.
"""

from retrykit.kernel.errors.application import ApplicationError
from retrykit.kernel.errors.base import BaseError

__all__ = ["ApplicationError", "BaseError"]
