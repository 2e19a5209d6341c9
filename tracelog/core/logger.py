"""
Logger that renders call-site annotated lines to the console and a daily file.
"""

import os
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from ..models import (
    CallerInfo, ErrorPolicy, Level, LogRecord, LoggerConfig,
    resolve_log_file
)
from ..infrastructure.caller import resolve_caller as default_resolve_caller
from ..infrastructure.error_handler import (
    ConfigurationError, LogWriteError, TraceLogError, handle_io_error
)
from ..infrastructure.logger import logger
from .formatter import DEFAULT_FORMAT, KNOWN_PLACEHOLDERS, Formatter


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


####
##      SINKS
#####
@handle_io_error("directory")
def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


@handle_io_error("write")
def _append_line(path: Path, line: str, create: bool) -> None:
    # Opened per line so other processes can append to the same file
    if create:
        handle = open(path, "a", encoding="utf-8")
    else:
        try:
            fd = os.open(path, os.O_WRONLY | os.O_APPEND)
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Log file {path} does not exist and create_if_missing is disabled", e
            ) from e
        handle = os.fdopen(fd, "a", encoding="utf-8")

    with handle as f:
        f.write(line)
        f.flush()


@handle_io_error("console")
def _write_stream(stream: TextIO, line: str) -> None:
    try:
        stream.write(line)
        stream.flush()
    except ValueError as e:
        # Raised by closed streams
        raise LogWriteError("Console stream is closed", e) from e


####
##      LOGGER
#####
class Logger:
    """
    Formats log lines with call-site metadata and dispatches them to sinks.

    Each line carries the logger's trace code and a counter that starts at
    zero and advances after every emitted line, so the first line shows
    ``0000``. When ``file_target`` names a directory, lines are appended to
    ``<file_target>/<YYYYMMDD>.log`` where the UTC date is fixed when the
    logger is constructed.
    """

    def __init__(
        self,
        console_enabled: bool = False,
        file_target: Union[str, Path] = "",
        create_if_missing: bool = True,
        trace_code: str = "",
        format_template: str = DEFAULT_FORMAT,
        *,
        error_policy: ErrorPolicy = ErrorPolicy.RAISE,
        console: Optional[TextIO] = None,
        resolve_caller: Optional[Callable[[int], CallerInfo]] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        config = LoggerConfig(
            console_enabled=console_enabled,
            file_target=file_target,
            create_if_missing=create_if_missing,
            trace_code=trace_code,
            format_template=format_template,
            error_policy=error_policy,
        )

        self._config = config
        self._console = console
        self._resolve_caller = resolve_caller or default_resolve_caller
        self._clock = clock or _utc_now
        self._formatter = Formatter(config.format_template)
        self._counter = 0
        self._lock = threading.Lock()

        started = self._clock()
        if started.tzinfo is None:
            started = started.replace(tzinfo=timezone.utc)
        today = started.astimezone(timezone.utc).date()
        self._file_path = resolve_log_file(config.file_target, today)
        if self._file_path is not None:
            logger.debug(f"Log file resolved to {self._file_path}")

        unknown = [
            name for name in self._formatter.placeholders
            if name not in KNOWN_PLACEHOLDERS
        ]
        if unknown:
            logger.warning(
                f"Format template references unknown placeholders: {', '.join(unknown)}"
            )

    @classmethod
    def from_config(cls, config: LoggerConfig, **capabilities) -> "Logger":
        """Build a logger from a LoggerConfig plus optional console/resolver/clock."""

        return cls(
            config.console_enabled,
            config.file_target,
            config.create_if_missing,
            config.trace_code,
            config.format_template,
            error_policy=config.error_policy,
            **capabilities
        )

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def trace_code(self) -> str:
        return self._config.trace_code

    @property
    def file_path(self) -> Optional[Path]:
        return self._file_path

    @property
    def console_enabled(self) -> bool:
        return self._config.console_enabled

    @property
    def create_if_missing(self) -> bool:
        return self._config.create_if_missing

    @property
    def format_template(self) -> str:
        return self._formatter.template

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._config.error_policy

    def log_error(self, message: str) -> str:
        return self.log(message, Level.ERROR, 1)

    def log_info(self, message: str) -> str:
        return self.log(message, Level.INFO, 1)

    def log_warning(self, message: str) -> str:
        return self.log(message, Level.WARNING, 1)

    def log_inner_error(self, message: str, skip: int) -> str:
        return self.log(message, Level.ERROR, skip + 1)

    def log_inner_info(self, message: str, skip: int) -> str:
        return self.log(message, Level.INFO, skip + 1)

    def log_inner_warning(self, message: str, skip: int) -> str:
        return self.log(message, Level.WARNING, skip + 1)

    def log(self, message: str, level: Union[Level, str], skip: int = 0) -> str:
        """
        Emit one line to the configured sinks.

        Args:
            message: Free-form text, bound to ``${value}``
            level: A Level or a custom level token
            skip: Frames above this method's caller to attribute the line to

        Returns:
            The rendered line, newline included

        Raises:
            ConfigurationError: File missing with create_if_missing disabled,
                or its directory cannot be created
            LogWriteError: Opening, writing or flushing the file failed, or
                the console stream rejected the line
            ValueError: Negative skip or empty level
        """
        if skip < 0:
            raise ValueError("skip cannot be negative")

        caller = self._resolve_caller(skip + 1)
        level_token = level.value if isinstance(level, Level) else str(level)
        if not level_token:
            raise ValueError("level cannot be empty")

        with self._lock:
            record = LogRecord(
                timestamp=self._clock(),
                trace_code=self._config.trace_code,
                sequence=self._counter,
                level=level_token,
                caller=caller,
                message=str(message),
            )
            line = self._formatter.render(record.to_bindings()) + "\n"

            # Once any sink has the line its counter value is spent
            emitted = False
            try:
                if self._config.console_enabled:
                    try:
                        self._write_console(line)
                        emitted = True
                    except TraceLogError as e:
                        self._handle_sink_error(e, line, console_usable=False)

                if self._file_path is not None:
                    try:
                        self._write_file(line)
                    except TraceLogError as e:
                        self._handle_sink_error(
                            e, line, console_usable=not self._config.console_enabled
                        )

                emitted = True
            finally:
                if emitted:
                    self._counter += 1

        return line

    def reset_counter(self) -> None:
        """Start counting from zero again, e.g. for a new request."""

        with self._lock:
            self._counter = 0

    def _write_console(self, line: str) -> None:
        stream = self._console if self._console is not None else sys.stderr
        _write_stream(stream, line)

    def _write_file(self, line: str) -> None:
        if self._config.create_if_missing:
            _ensure_parent(self._file_path)
        _append_line(self._file_path, line, self._config.create_if_missing)
        logger.debug(f"Appended line to {self._file_path}")

    def _handle_sink_error(self, error: TraceLogError, line: str, console_usable: bool) -> None:
        policy = self._config.error_policy

        if policy is ErrorPolicy.CONSOLE_FALLBACK:
            logger.warning(f"Falling back to console output: {error}")
            if console_usable:
                self._write_console(line)
            return

        if policy is ErrorPolicy.FATAL:
            logger.critical(f"Unrecoverable log sink failure: {error}")
            raise SystemExit(1) from error

        raise error


__all__ = [
    "Logger",
]
