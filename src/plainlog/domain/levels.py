from __future__ import annotations

"""
Severity Levels.

Defines the ordered severity scale used by both sinks and the tolerant
translation of textual level identifiers (configuration files, environment)
into that scale.
"""

import logging
from enum import IntEnum
from typing import Dict, Union

logger = logging.getLogger(__name__)

UNKNOWN_LEVEL_NAME = "UNKNOWN"


class LogLevel(IntEnum):
    """Message severity, totally ordered from DEBUG (lowest) to ERROR."""
    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4


# Mapping of string identifiers to severity members
_LEVEL_MAP: Dict[str, LogLevel] = {
    "DEBUG": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "SUCCESS": LogLevel.SUCCESS,
    "OK": LogLevel.SUCCESS,
    "WARNING": LogLevel.WARNING,
    "WARN": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def level_name(level: Union[LogLevel, int]) -> str:
    """
    Resolve the display token of a severity.

    Args:
        level: A LogLevel member or its raw integer value.

    Returns:
        str: "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR" or "UNKNOWN".
    """
    try:
        return LogLevel(level).name
    except ValueError:
        return UNKNOWN_LEVEL_NAME


def parse_level(
        value: Union[str, int, LogLevel, None],
        default: LogLevel = LogLevel.INFO,
) -> LogLevel:
    """
    Convert a textual or numeric level identifier into a LogLevel.

    Unrecognized identifiers fall back to the default instead of raising,
    so a typo in a configuration file never disables logging.

    Args:
        value: Level name (case-insensitive), integer value, or member.
        default: Level used when the value is empty or unknown.

    Returns:
        LogLevel: The resolved severity.
    """
    if value is None or value == "":
        return default

    if isinstance(value, LogLevel):
        return value

    if isinstance(value, int):
        try:
            return LogLevel(value)
        except ValueError:
            logger.warning("Unknown log level value %r; using %s", value, default.name)
            return default

    key = str(value).strip().upper()
    if key in _LEVEL_MAP:
        return _LEVEL_MAP[key]

    logger.warning("Unknown log level name %r; using %s", value, default.name)
    return default
