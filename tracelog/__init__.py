"""
tracelog: a small embeddable logger.

Renders each call into a templated line carrying a timestamp, a trace code,
a running counter, the level and the calling function, then writes it to the
console and/or a daily log file.
"""

from .models import (
    Level,
    CallerInfo,
    LogRecord,
    ErrorPolicy,
    LoggerConfig,
)
from .core.formatter import DEFAULT_FORMAT, Formatter, render
from .core.trace import generate_trace_code
from .core.logger import Logger
from .infrastructure.caller import resolve_caller
from .infrastructure.error_handler import (
    TraceLogError,
    ConfigurationError,
    LogWriteError,
)

__version__ = "0.1.0"

__all__ = [
    "Level",
    "CallerInfo",
    "LogRecord",
    "ErrorPolicy",
    "LoggerConfig",
    "DEFAULT_FORMAT",
    "Formatter",
    "render",
    "generate_trace_code",
    "Logger",
    "resolve_caller",
    "TraceLogError",
    "ConfigurationError",
    "LogWriteError",
]
