"""
Log record models for tracelog.

This module contains the severity levels, the call-site metadata container
and the per-call record that the formatter renders into a line.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict


class Level(Enum):
    """Severity levels written into a log line."""

    ERROR = "ERROR"
    INFO = "INFO"
    WARNING = "WARNING"


@dataclass(frozen=True)
class CallerInfo:
    """Immutable description of the call site that produced a log line."""

    function_name: str
    file_path: str
    line_number: int

    def __post_init__(self) -> None:
        if self.line_number < 0:
            raise ValueError(f"Invalid line_number: {self.line_number}")


UNKNOWN_CALLER = CallerInfo("<unknown>", "<unknown>", 0)


@dataclass(frozen=True)
class LogRecord:
    """Single log call, captured at the moment it was made."""

    timestamp: datetime
    trace_code: str
    sequence: int
    level: str
    caller: CallerInfo
    message: str

    def __post_init__(self) -> None:
        if self.sequence < 0:
            raise ValueError("sequence cannot be negative")
        if isinstance(self.level, Level):
            object.__setattr__(self, "level", self.level.value)

    @property
    def timestamp_text(self) -> str:
        """RFC 3339 rendering in UTC with second precision."""

        ts = self.timestamp
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    @property
    def counter_text(self) -> str:
        return f"{self.sequence:04d}"

    def to_bindings(self) -> Dict[str, str]:
        """Placeholder values for this record, keyed by placeholder name."""

        return {
            "now": self.timestamp_text,
            "traceCode": self.trace_code,
            "counter": self.counter_text,
            "level": self.level,
            "funcName": self.caller.function_name,
            "fileName": self.caller.file_path,
            "lineNumber": str(self.caller.line_number),
            "value": self.message,
        }


__all__ = [
    "Level",
    "CallerInfo",
    "UNKNOWN_CALLER",
    "LogRecord",
]
