from __future__ import annotations

"""
Logger State Machine and Emission Pipeline.

Owns the sink configuration (thresholds, file path, timestamp pattern,
prefix, colors, tags) and at most one open log file. Each log call is
gated by both thresholds, rendered once, then fanned out to the console
and, when enabled, to the file with an immediate flush.

The Logger holds no lock. Share one instance across threads only through
plainlog.core.locking.LockedLogger.
"""

import logging
import os
import sys
import threading
from typing import Any, Dict, Mapping, Optional, TextIO, Tuple, Union

import colorama

from plainlog.core.formatting import (
    build_line,
    colorize,
    epoch_millis,
    format_message,
    format_timestamp,
)
from plainlog.core.tags import Tag, TagList
from plainlog.domain.config import LoggerConfig
from plainlog.domain.constants import DEFAULT_COLORS, DEFAULT_DATE_FORMAT
from plainlog.domain.levels import LogLevel, level_name, parse_level
from plainlog.infra import fs

logger = logging.getLogger(__name__)

colorama.just_fix_windows_console()

LevelLike = Union[LogLevel, int]


class Logger:
    """
    Leveled logger writing to the console and an optional append-only file.
    """

    def __init__(
            self,
            console_level: LevelLike = LogLevel.DEBUG,
            file_level: LevelLike = LogLevel.INFO,
            file_path: str = "log.txt",
            date_format: Optional[str] = None,
            log_to_file: bool = False,
            include_thread_id: bool = False,
            include_process_id: bool = False,
            *,
            prefix: str = "",
            colors: Optional[Mapping[LogLevel, str]] = None,
            colorize: bool = True,
            stream: Optional[TextIO] = None,
            error_stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the logger and open the log file if file logging is on.

        A file that cannot be opened is reported on the error stream; the
        logger is still returned and keeps writing to the console.

        Args:
            console_level: Minimum severity written to the console.
            file_level: Minimum severity written to the file.
            file_path: Log file location.
            date_format: strftime pattern; None selects "%Y-%m-%d %H:%M:%S".
            log_to_file: Enable the file sink and open file_path.
            include_thread_id: Add the calling thread identifier to each line.
            include_process_id: Add the process identifier to each line.
            prefix: Free text placed after the level token.
            colors: Per-level ANSI codes for the console level token.
            colorize: Disable to write plain level tokens to the console.
            stream: Console stream. Defaults to sys.stdout at write time.
            error_stream: Diagnostic stream. Defaults to sys.stderr at write time.
        """
        self._console_level = console_level
        self._file_level = file_level
        self._file_path = str(file_path)
        self._date_format = date_format if date_format is not None else DEFAULT_DATE_FORMAT
        self._prefix = str(prefix)
        self._log_to_file = bool(log_to_file)
        self._include_thread_id = bool(include_thread_id)
        self._include_process_id = bool(include_process_id)
        self._colors: Dict[LogLevel, str] = dict(colors if colors is not None else DEFAULT_COLORS)
        self._colorize = bool(colorize)
        self._stream = stream
        self._error_stream = error_stream
        self._tags = TagList()
        self._file: Optional[TextIO] = None
        self._closed = False

        if self._log_to_file:
            self._file = fs.open_append(self._file_path, self._error_stream)

    @classmethod
    def from_config(cls, cfg: LoggerConfig, **kwargs: Any) -> "Logger":
        """
        Build a Logger from a LoggerConfig.

        Args:
            cfg: Configuration record.
            **kwargs: Extra constructor keywords (streams, colors).

        Returns:
            Logger: The initialized logger.
        """
        return cls(
            console_level=parse_level(cfg.console_level, LogLevel.DEBUG),
            file_level=parse_level(cfg.file_level, LogLevel.INFO),
            file_path=cfg.file_path,
            date_format=cfg.date_format,
            log_to_file=cfg.log_to_file,
            include_thread_id=cfg.include_thread_id,
            include_process_id=cfg.include_process_id,
            prefix=cfg.prefix,
            colorize=cfg.colorize,
            **kwargs,
        )

    # -------------------------------------------------------------------------
    # STATE INSPECTION
    # -------------------------------------------------------------------------

    @property
    def console_level(self) -> LevelLike:
        return self._console_level

    @property
    def file_level(self) -> LevelLike:
        return self._file_level

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def date_format(self) -> str:
        return self._date_format

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def log_to_file(self) -> bool:
        return self._log_to_file

    @property
    def include_thread_id(self) -> bool:
        return self._include_thread_id

    @property
    def include_process_id(self) -> bool:
        return self._include_process_id

    @property
    def colors(self) -> Dict[LogLevel, str]:
        return dict(self._colors)

    @property
    def tags(self) -> Tuple[Tag, ...]:
        return self._tags.snapshot()

    @property
    def is_file_open(self) -> bool:
        return self._file is not None

    @property
    def closed(self) -> bool:
        return self._closed

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    def set_prefix(self, prefix: str) -> None:
        self._prefix = str(prefix)

    def set_date_format(self, date_format: str) -> None:
        self._date_format = str(date_format)

    def set_levels(self, console_level: LevelLike, file_level: LevelLike) -> None:
        self._console_level = console_level
        self._file_level = file_level

    def set_log_to_file(self, log_to_file: bool) -> None:
        """
        Toggle the file sink flag.

        Only the flag changes: no file is opened or closed here. Use
        set_log_file() to (re)open the file.
        """
        self._log_to_file = bool(log_to_file)

    def set_log_file(self, file_path: str) -> None:
        """
        Switch to a new log file.

        The current handle is closed before the new path is opened in
        append mode. An open failure is reported on the error stream and
        leaves the logger without a file handle.

        Args:
            file_path: New log file location.
        """
        self._close_file()
        self._file_path = str(file_path)
        self._file = fs.open_append(self._file_path, self._error_stream)

    def set_include_thread_id(self, include_thread_id: bool) -> None:
        self._include_thread_id = bool(include_thread_id)

    def set_include_process_id(self, include_process_id: bool) -> None:
        self._include_process_id = bool(include_process_id)

    def set_colors(self, colors: Mapping[LogLevel, str]) -> None:
        self._colors = dict(colors)

    def set_colorize(self, enabled: bool) -> None:
        self._colorize = bool(enabled)

    # -------------------------------------------------------------------------
    # EMISSION
    # -------------------------------------------------------------------------

    def log(self, level: LevelLike, message: str, /, *args: Any, **kwargs: Any) -> None:
        """
        Emit a message to every sink whose threshold it reaches.

        The call returns early when the level is below both thresholds.
        Otherwise the console receives the line if the level reaches the
        console threshold, and the file receives it (then is flushed) if
        file logging is enabled, a handle is open and the level reaches the
        file threshold.

        The console check is intentional: a level below the console
        threshold but at or above the file threshold goes to the file only.
        Do not drop it in favour of writing every line that passes the
        early return to the console.

        level and message are positional-only, so templates may use
        "{level}" or "{message}" as keyword placeholders.

        Args:
            level: Message severity.
            message: Message text, or a str.format template when arguments follow.
            *args: Positional interpolation values.
            **kwargs: Keyword interpolation values.
        """
        if level < self._console_level and level < self._file_level:
            return

        timestamp = format_timestamp(self._date_format)
        name = level_name(level)
        text = format_message(message, args, kwargs)
        thread_id = threading.get_ident() if self._include_thread_id else None
        process_id = os.getpid() if self._include_process_id else None

        if level >= self._console_level:
            token = colorize(name, self._color_for(level)) if self._colorize else name
            line = build_line(timestamp, token, self._prefix, text, thread_id, process_id)
            console = self._stream if self._stream is not None else sys.stdout
            console.write(f"{line}\n")

        if self._log_to_file and self._file is not None and level >= self._file_level:
            line = build_line(timestamp, name, self._prefix, text, thread_id, process_id)
            try:
                self._file.write(f"{line}\n")
                self._file.flush()
            except OSError as e:
                fs.report_diagnostic(
                    f"ERROR: Could not write to log file '{self._file_path}': {e}",
                    self._error_stream,
                )

    def debug(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.DEBUG, message, *args, **kwargs)

    def info(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.INFO, message, *args, **kwargs)

    def success(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.SUCCESS, message, *args, **kwargs)

    def warning(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.WARNING, message, *args, **kwargs)

    def error(self, message: str, /, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.ERROR, message, *args, **kwargs)

    # -------------------------------------------------------------------------
    # TAGS & TIMESTAMPS
    # -------------------------------------------------------------------------

    def add_tag(self, tag: str) -> None:
        """Store a tag; silently ignored once the tag list is full."""
        if not self._tags.add(tag):
            logger.debug("Tag list full (%d); dropped %r", self._tags.capacity, tag)

    def log_timestamp(self, tag: str) -> None:
        """Emit a DEBUG line with the tag and the epoch time in milliseconds."""
        self.log(LogLevel.DEBUG, "[{}] Timestamp: {} ms", tag, epoch_millis())

    # -------------------------------------------------------------------------
    # ROTATION
    # -------------------------------------------------------------------------

    def rotate_log(self, max_size: int) -> bool:
        """
        Rotate the log file once it has reached max_size bytes.

        The file is closed, moved to "<path>.old" (replacing an older
        archive) and a fresh file is opened at the original path. Rotation
        only happens when the caller invokes this method.

        Args:
            max_size: Size threshold in bytes.

        Returns:
            bool: True if the file was rotated.
        """
        if self._file is None:
            return False

        try:
            size = fs.current_size(self._file)
        except OSError as e:
            fs.report_diagnostic(
                f"ERROR: Could not read size of log file '{self._file_path}': {e}",
                self._error_stream,
            )
            return False

        if size < max_size:
            return False

        self._close_file()
        rotated = fs.archive_file(self._file_path, self._error_stream)
        self._file = fs.open_append(self._file_path, self._error_stream)
        return rotated

    # -------------------------------------------------------------------------
    # TEARDOWN
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Flush and close the log file. Safe to call more than once."""
        self._close_file()
        self._closed = True

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _color_for(self, level: LevelLike) -> Optional[str]:
        try:
            return self._colors.get(LogLevel(level))
        except ValueError:
            return None

    def _close_file(self) -> None:
        handle, self._file = self._file, None
        if handle is None:
            return
        try:
            handle.flush()
            handle.close()
        except OSError as e:
            fs.report_diagnostic(
                f"ERROR: Could not close log file '{self._file_path}': {e}",
                self._error_stream,
            )
        logger.debug("Closed log file %s", self._file_path)
