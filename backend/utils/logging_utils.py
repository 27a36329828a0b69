"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages,
improving observability and debugging.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keyword arguments picked up by log_operation as identifying context
CONTEXT_KEYS = ("user_id", "artist_id", "album_id", "song_id", "playlist_id", "filename")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Context is rendered as ``key=value`` pairs after the message so it shows up
    with the plain formatter configured in main.py.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("User logged in", extra={
            "user_id": user.id,
            "operation": "login",
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def _render(self, message: str, extra: Optional[Dict[str, Any]]) -> str:
        context = self._add_context(extra)
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{pairs}]"

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(self._render(message, extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(self._render(message, extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(self._render(message, extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(self._render(message, extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(
            request_id="abc-123",
            method="GET",
            path="/api/songs"
        )
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _operation_context(operation_name: str, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    context = {"operation": operation_name}
    for key in CONTEXT_KEYS:
        if kwargs.get(key) is not None:
            context[key] = kwargs[key]
    return context


def log_operation(operation_name: str):
    """
    Decorator to automatically log operation start/end with structured context.

    Identifiers passed as keyword arguments (``song_id=...``, ``filename=...``)
    are attached to every message.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("delete_song")
        def delete_song(self, song_id: int):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _operation_context(operation_name, kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = await func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}", extra=context)
                raise

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _operation_context(operation_name, kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}", extra=context)
                raise

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
