"""Utility helpers - structured logging."""

from .logger import (
    StructuredLogger,
    get_logger,
    log_operation,
    set_log_level,
    summarize_event,
)

__all__ = [
    "StructuredLogger",
    "get_logger",
    "log_operation",
    "set_log_level",
    "summarize_event",
]
