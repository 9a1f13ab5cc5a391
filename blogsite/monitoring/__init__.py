"""Logging setup shared by the web application and the scripts."""

from blogsite.monitoring.logging import (
    configure_logging,
    get_logger,
    sanitize_log_message,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_log_message",
]
