from __future__ import annotations

"""
Thread-Safe Logger Facade.

Logger performs no internal synchronization. LockedLogger serializes every
operation on a wrapped Logger behind a single re-entrant lock, so that
emission, file switching and rotation never interleave on the shared file
handle.
"""

import threading
from typing import Any, Dict, Mapping, Tuple

from plainlog.core.logger import LevelLike, Logger
from plainlog.core.tags import Tag
from plainlog.domain.levels import LogLevel


class LockedLogger:
    """Mutual-exclusion wrapper delegating to a single Logger instance."""

    def __init__(self, inner: Logger) -> None:
        self._inner = inner
        self._lock = threading.RLock()

    @property
    def inner(self) -> Logger:
        return self._inner

    # --- State Inspection ---

    @property
    def console_level(self) -> LevelLike:
        with self._lock:
            return self._inner.console_level

    @property
    def file_level(self) -> LevelLike:
        with self._lock:
            return self._inner.file_level

    @property
    def file_path(self) -> str:
        with self._lock:
            return self._inner.file_path

    @property
    def date_format(self) -> str:
        with self._lock:
            return self._inner.date_format

    @property
    def prefix(self) -> str:
        with self._lock:
            return self._inner.prefix

    @property
    def log_to_file(self) -> bool:
        with self._lock:
            return self._inner.log_to_file

    @property
    def include_thread_id(self) -> bool:
        with self._lock:
            return self._inner.include_thread_id

    @property
    def include_process_id(self) -> bool:
        with self._lock:
            return self._inner.include_process_id

    @property
    def colors(self) -> Dict[LogLevel, str]:
        with self._lock:
            return self._inner.colors

    @property
    def tags(self) -> Tuple[Tag, ...]:
        with self._lock:
            return self._inner.tags

    @property
    def is_file_open(self) -> bool:
        with self._lock:
            return self._inner.is_file_open

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._inner.closed

    # --- Configuration ---

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._inner.set_prefix(prefix)

    def set_date_format(self, date_format: str) -> None:
        with self._lock:
            self._inner.set_date_format(date_format)

    def set_levels(self, console_level: LevelLike, file_level: LevelLike) -> None:
        with self._lock:
            self._inner.set_levels(console_level, file_level)

    def set_log_to_file(self, log_to_file: bool) -> None:
        with self._lock:
            self._inner.set_log_to_file(log_to_file)

    def set_log_file(self, file_path: str) -> None:
        with self._lock:
            self._inner.set_log_file(file_path)

    def set_include_thread_id(self, include_thread_id: bool) -> None:
        with self._lock:
            self._inner.set_include_thread_id(include_thread_id)

    def set_include_process_id(self, include_process_id: bool) -> None:
        with self._lock:
            self._inner.set_include_process_id(include_process_id)

    def set_colors(self, colors: Mapping[LogLevel, str]) -> None:
        with self._lock:
            self._inner.set_colors(colors)

    def set_colorize(self, enabled: bool) -> None:
        with self._lock:
            self._inner.set_colorize(enabled)

    # --- Emission ---

    def log(self, level: LevelLike, message: str, /, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            self._inner.log(level, message, *args, **kwargs)

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

    def add_tag(self, tag: str) -> None:
        with self._lock:
            self._inner.add_tag(tag)

    def log_timestamp(self, tag: str) -> None:
        with self._lock:
            self._inner.log_timestamp(tag)

    # --- Rotation & Teardown ---

    def rotate_log(self, max_size: int) -> bool:
        with self._lock:
            return self._inner.rotate_log(max_size)

    def close(self) -> None:
        with self._lock:
            self._inner.close()

    def __enter__(self) -> "LockedLogger":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
