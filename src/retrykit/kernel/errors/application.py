"""Application-layer errors — raised by the library itself, never by user actions."""

from __future__ import annotations

from retrykit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse of the library surface (bad configuration, invalid arguments)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
