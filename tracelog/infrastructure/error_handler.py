"""
Error types and OS error translation for tracelog sinks.
"""

import functools
from typing import Callable, Optional, TypeVar

from .logger import logger


F = TypeVar("F", bound=Callable)


class TraceLogError(Exception):
    """Base exception for failures while emitting a log line."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class ConfigurationError(TraceLogError):
    """The file target is unusable as configured."""


class LogWriteError(TraceLogError):
    """Opening, writing or flushing the log file failed."""


def handle_io_error(stage: str) -> Callable[[F], F]:
    """
    Decorator translating OSError from a sink step into a TraceLogError.

    Args:
        stage: ``"directory"`` for directory creation, which maps to
            ConfigurationError; any other stage maps to LogWriteError

    Returns:
        Decorator for the sink step
    """
    error_cls = ConfigurationError if stage == "directory" else LogWriteError

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except TraceLogError:
                raise
            except OSError as e:
                logger.debug(f"{stage} step failed: {e}")
                raise error_cls(f"Log {stage} step failed", e) from e
        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "TraceLogError",
    "ConfigurationError",
    "LogWriteError",
    "handle_io_error",
]
