"""Kernel – framework-agnostic building blocks."""

from retrykit.kernel.errors import ApplicationError, BaseError

__all__ = ["ApplicationError", "BaseError"]
