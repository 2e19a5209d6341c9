"""
Configuration models for tracelog loggers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..core.formatter import DEFAULT_FORMAT


class ErrorPolicy(Enum):
    """How a failing sink write is surfaced to the caller."""

    RAISE = "raise"                         # Raise a TraceLogError
    FATAL = "fatal"                         # Log critically and exit the process
    CONSOLE_FALLBACK = "console_fallback"   # Warn, write to console, carry on


def resolve_log_file(directory: Union[str, Path, None], today: date) -> Optional[Path]:
    """
    Resolve the dated log file inside a target directory.

    Args:
        directory: Directory holding the daily files, or empty for no file sink
        today: UTC calendar date the file is named after

    Returns:
        ``<directory>/<YYYYMMDD>.log``, or None when no directory is given
    """
    if directory is None or str(directory) == "":
        return None
    return Path(directory) / f"{today.strftime('%Y%m%d')}.log"


@dataclass
class LoggerConfig:
    """
    Construction parameters for a Logger.

    Mirrors the Logger constructor so a configuration can be built once,
    validated, and reused for several loggers.
    """

    console_enabled: bool = False
    file_target: Union[str, Path] = ""
    create_if_missing: bool = True
    trace_code: str = ""
    format_template: str = DEFAULT_FORMAT
    error_policy: ErrorPolicy = ErrorPolicy.RAISE

    def __post_init__(self) -> None:
        if not isinstance(self.format_template, str) or not self.format_template:
            raise ValueError("format_template must be a non-empty string")
        if self.trace_code is None:
            self.trace_code = ""
        if not isinstance(self.error_policy, ErrorPolicy):
            self.error_policy = ErrorPolicy(self.error_policy)


__all__ = [
    "ErrorPolicy",
    "resolve_log_file",
    "LoggerConfig",
]
