"""
Structured logging utility for the event consistency checker.

Provides JSON-formatted logging with event summarization (field names only,
never field values), context injection, and operation timing.
"""

import json
import logging
import os
import time
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
from functools import wraps

LOG_LEVEL_ENV = "EVENT_CONSISTENCY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Field names listed in a summary before truncation
MAX_SUMMARY_FIELDS = 20


def summarize_event(event: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Summarize an event record for logging without exposing its values.

    Event payloads routinely carry user identifiers, so only the shape of the
    record is logged.

    Args:
        event: Parsed event record (or None)

    Returns:
        Dict with field_count and up to MAX_SUMMARY_FIELDS field names

    Example:
        >>> summarize_event({"user_id": 123, "action": "login"})
        {'field_count': 2, 'fields': ['user_id', 'action']}
    """
    if not event:
        return {"field_count": 0, "fields": []}

    fields = list(event.keys())
    summary: Dict[str, Any] = {
        "field_count": len(fields),
        "fields": fields[:MAX_SUMMARY_FIELDS],
    }
    if len(fields) > MAX_SUMMARY_FIELDS:
        summary["truncated"] = True
    return summary


def resolve_log_level(level: Optional[str] = None) -> int:
    """
    Resolve a log level name to its numeric value.

    Falls back to EVENT_CONSISTENCY_LOG_LEVEL, then WARNING. Unknown names
    resolve to WARNING.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


class StructuredLogger:
    """
    JSON-formatted logger with context injection and operation timing.

    All log output is JSON so that comparison runs can be grepped or shipped
    to a log pipeline as-is.
    """

    def __init__(self, name: str, level: Optional[str] = None):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__ from calling module)
            level: Optional level name; defaults to EVENT_CONSISTENCY_LOG_LEVEL
        """
        self.logger = logging.getLogger(name)

        # Create console handler with JSON formatting
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.DEBUG)

            # JSON formatter
            formatter = logging.Formatter("%(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        # Keep a level set elsewhere (CLI flag, test capture) unless overridden
        if level is not None:
            self.logger.setLevel(resolve_log_level(level))
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(resolve_log_level())

    def _format_log(
        self,
        level: str,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        duration_ms: Optional[float] = None,
        error: Optional[str] = None,
    ) -> str:
        """
        Format log entry as JSON.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            message: Human-readable message
            operation: Operation name (e.g., "compare_events", "load_aliases")
            context: Context dict with grade, issue counts, field summaries
            duration_ms: Operation duration in milliseconds
            error: Error message if applicable

        Returns:
            JSON-formatted log string
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "message": message,
        }

        if operation:
            log_entry["operation"] = operation

        if context:
            log_entry["context"] = context

        if duration_ms is not None:
            log_entry["duration_ms"] = round(duration_ms, 2)

        if error:
            log_entry["error"] = error

        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def debug(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Log debug message."""
        log_json = self._format_log("DEBUG", message, operation, context)
        self.logger.debug(log_json)

    def info(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        duration_ms: Optional[float] = None,
    ):
        """Log info message."""
        log_json = self._format_log("INFO", message, operation, context, duration_ms)
        self.logger.info(log_json)

    def warning(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ):
        """Log warning message."""
        log_json = self._format_log("WARNING", message, operation, context, error=error)
        self.logger.warning(log_json)

    def error(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
        duration_ms: Optional[float] = None,
    ):
        """Log error message."""
        log_json = self._format_log(
            "ERROR", message, operation, context, duration_ms, error
        )
        self.logger.error(log_json)


def log_operation(operation_name: str):
    """
    Decorator to automatically log operation start, duration, and completion.

    Usage:
        @log_operation("check_texts")
        def check_texts(self, text_a, text_b):
            ...
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)

            # Build context from function signature
            context = {
                "function": func.__name__,
            }

            if len(args) > 0:
                context["arg_count"] = len(args)

            logger.debug(
                f"Starting {operation_name}", operation=operation_name, context=context
            )

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                duration_ms = (time.time() - start_time) * 1000
                logger.info(
                    f"Completed {operation_name}",
                    operation=operation_name,
                    context=context,
                    duration_ms=duration_ms,
                )
                return result
            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                logger.error(
                    f"Failed {operation_name}",
                    operation=operation_name,
                    context=context,
                    error=str(e),
                    duration_ms=duration_ms,
                )
                raise

        return wrapper

    return decorator


def set_log_level(level: Optional[str], prefix: str = "event_consistency") -> None:
    """
    Set the level of every logger under prefix.

    Module loggers carry their own level, so changing the package logger
    alone would not reach them.

    Args:
        level: Level name (e.g. "DEBUG")
        prefix: Logger name prefix
    """
    value = resolve_log_level(level)
    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(value)


def get_logger(name: str) -> StructuredLogger:
    """
    Factory function to get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
