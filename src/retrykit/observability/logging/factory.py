"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from retrykit.config.settings import ResilienceSettings


class JsonLoggerFactory:
    """Configure structlog for JSON output on a stdlib handler."""

    @staticmethod
    def configure(
        level: int | None = None,
        handler: logging.Handler | None = None,
        settings: ResilienceSettings | None = None,
    ) -> None:
        """Install the JSON pipeline on the root logger.

        An explicit *level* wins; otherwise ``settings.log_level`` (the
        ``RETRYKIT_LOG_LEVEL`` variable when loaded from the environment),
        falling back to ``INFO``.
        """
        if level is None:
            level = settings.log_level_number if settings is not None else logging.INFO
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = handler or logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
