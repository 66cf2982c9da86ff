from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Low-level operations on the log file sink: append-mode opening with
diagnostic reporting, length queries and the rename step of rotation.
Failures are reported on the diagnostic stream and surfaced as None/False
so callers can degrade to console-only output instead of aborting.
"""

import logging
import os
import sys
from typing import Optional, TextIO

from plainlog.domain.constants import ROTATED_SUFFIX

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------

def report_diagnostic(message: str, stream: Optional[TextIO] = None) -> None:
    """
    Write a one-line diagnostic to the error stream.

    Args:
        message: Text to report, without trailing newline.
        stream: Target stream. Defaults to the current sys.stderr.
    """
    target = stream if stream is not None else sys.stderr
    if target is None:
        return
    target.write(f"{message}\n")
    target.flush()


# -----------------------------------------------------------------------------
# FILE SINK API
# -----------------------------------------------------------------------------

def open_append(path: str, error_stream: Optional[TextIO] = None) -> Optional[TextIO]:
    """
    Open a log file for appending, creating it if needed.

    Args:
        path: Target file path.
        error_stream: Diagnostic stream for open failures.

    Returns:
        Optional[TextIO]: The open handle, or None if the file could not be opened.
    """
    try:
        handle = open(path, "a", encoding="utf-8", errors="backslashreplace")
    except OSError as e:
        report_diagnostic(f"ERROR: Could not open log file '{path}': {e}", error_stream)
        return None

    logger.debug("Opened log file %s", path)
    return handle


def current_size(handle: TextIO) -> int:
    """
    Return the current length in bytes of an open log file.

    Args:
        handle: Open file object.

    Returns:
        int: File length as reported by the OS after flushing pending writes.
    """
    handle.flush()
    return os.fstat(handle.fileno()).st_size


def rotated_path(path: str) -> str:
    """Return the archive path used when rotating `path`."""
    return f"{path}{ROTATED_SUFFIX}"


def archive_file(path: str, error_stream: Optional[TextIO] = None) -> bool:
    """
    Move a log file to its rotation archive, replacing any previous archive.

    Args:
        path: Active log file path.
        error_stream: Diagnostic stream for rename failures.

    Returns:
        bool: True if the file was moved.
    """
    target = rotated_path(path)
    try:
        os.replace(path, target)
    except OSError as e:
        report_diagnostic(f"ERROR: Could not rotate log file '{path}' to '{target}': {e}", error_stream)
        return False

    logger.debug("Rotated %s -> %s", path, target)
    return True
