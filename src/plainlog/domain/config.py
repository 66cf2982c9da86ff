from __future__ import annotations

"""
Logger Configuration Models.

Defines the immutable configuration record used to build a Logger and the
tolerant loaders that produce it from plain dictionaries or JSON files.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from plainlog.domain.constants import DEFAULT_DATE_FORMAT, DEFAULT_FILE_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable specification for Logger initialization.

    Attributes:
        console_level: Minimum severity written to the console.
        file_level: Minimum severity written to the log file.
        file_path: Target path of the log file.
        date_format: strftime pattern for the timestamp column.
        log_to_file: Open and write the log file.
        include_thread_id: Append the calling thread identifier.
        include_process_id: Append the current process identifier.
        prefix: Free text placed after the level token.
        colorize: Wrap console level tokens in ANSI color codes.
    """
    console_level: Union[str, int] = "DEBUG"
    file_level: Union[str, int] = "INFO"
    file_path: str = DEFAULT_FILE_PATH
    date_format: str = DEFAULT_DATE_FORMAT

    log_to_file: bool = False
    include_thread_id: bool = False
    include_process_id: bool = False

    prefix: str = ""
    colorize: bool = True


# -----------------------------------------------------------------------------
# BUILDERS
# -----------------------------------------------------------------------------

def build_config_from_dict(d: Dict[str, Any]) -> LoggerConfig:
    """
    Build LoggerConfig from a dict (e.g. a parsed JSON document).

    Accepted keys (tolerant):
      - console_level / level
      - file_level
      - file_path / log_file
      - date_format / datefmt
      - log_to_file, include_thread_id, include_process_id
      - prefix, colorize

    Args:
        d: Raw configuration mapping.

    Returns:
        LoggerConfig: Config with defaults for every missing key.
    """
    defaults = LoggerConfig()

    console_level = _level_value(d, ("console_level", "level"), defaults.console_level)
    file_level = _level_value(d, ("file_level",), defaults.file_level)
    file_path = str(d.get("file_path") or d.get("log_file") or defaults.file_path)
    date_format = str(d.get("date_format") or d.get("datefmt") or defaults.date_format)

    return LoggerConfig(
        console_level=console_level,
        file_level=file_level,
        file_path=file_path,
        date_format=date_format,
        log_to_file=bool(d.get("log_to_file", defaults.log_to_file)),
        include_thread_id=bool(d.get("include_thread_id", defaults.include_thread_id)),
        include_process_id=bool(d.get("include_process_id", defaults.include_process_id)),
        prefix=str(d.get("prefix") or ""),
        colorize=bool(d.get("colorize", defaults.colorize)),
    )


def load_config(path: Optional[str]) -> LoggerConfig:
    """
    Load a LoggerConfig from a JSON file.

    Falls back to the default configuration when the file is missing,
    unreadable or not a JSON object.

    Args:
        path: Location of the JSON document.

    Returns:
        LoggerConfig: The loaded or default configuration.
    """
    if not path or not os.path.exists(path):
        logger.debug("No logger config at %r; using defaults.", path)
        return LoggerConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Failed to read logger config %s: %s. Using defaults.", path, e)
        return LoggerConfig()

    if not isinstance(data, dict):
        logger.warning("Logger config %s is not a JSON object. Using defaults.", path)
        return LoggerConfig()

    return build_config_from_dict(data)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _level_value(
        d: Dict[str, Any],
        keys: Tuple[str, ...],
        default: Union[str, int],
) -> Union[str, int]:
    """
    Pick the first present level entry, keeping integers (0 is DEBUG) intact.
    """
    for key in keys:
        value = d.get(key)
        if value is None or value == "":
            continue
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return str(value)
    return default
