"""Root error class for the retrykit error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error raised by retrykit itself.

    Failures raised by wrapped actions never pass through this hierarchy.
    Keyword arguments beyond *code* become ``detail``, the structured context
    that :meth:`to_dict` hands to log records. Chain an underlying error with
    ``raise ... from exc``; it is reported as ``cause``.
    """

    default_code: str = "base_error"

    def __init__(self, message: str, *, code: str | None = None, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = dict(self.detail)
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
