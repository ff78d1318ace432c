"""Observability module for streamcache.

Provides structured logging:
- JSON formatter for production
- Console formatter for development
"""

from streamcache.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "JsonFormatter",
    "ConsoleFormatter",
]
