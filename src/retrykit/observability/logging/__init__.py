"""Observability – structlog configuration and logger helper."""
from retrykit.observability.logging.factory import JsonLoggerFactory
from retrykit.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
