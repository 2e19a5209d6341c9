"""
Value objects shared by the formatter and the logger: levels, call sites,
per-call records and logger configuration.
"""

from .record import (
    Level,
    CallerInfo,
    UNKNOWN_CALLER,
    LogRecord,
)
from .config import (
    ErrorPolicy,
    resolve_log_file,
    LoggerConfig,
)

__all__ = [
    # Record models
    "Level",
    "CallerInfo",
    "UNKNOWN_CALLER",
    "LogRecord",
    # Config models
    "ErrorPolicy",
    "resolve_log_file",
    "LoggerConfig",
]
