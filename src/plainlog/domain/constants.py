from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Defaults shared by the logger and its configuration layer: timestamp
pattern, tag limits, rotation naming and the console color table.
"""

from types import MappingProxyType
from typing import Mapping

from colorama import Fore, Style

from plainlog.domain.levels import LogLevel

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_FILE_PATH = "log.txt"

# -----------------------------------------------------------------------------
# TAGS
# -----------------------------------------------------------------------------
MAX_TAGS = 10
MAX_TAG_LENGTH = 19

# -----------------------------------------------------------------------------
# ROTATION
# -----------------------------------------------------------------------------
ROTATED_SUFFIX = ".old"

# -----------------------------------------------------------------------------
# CONSOLE COLORS
# -----------------------------------------------------------------------------
COLOR_RESET: str = Style.RESET_ALL

DEFAULT_COLORS: Mapping[LogLevel, str] = MappingProxyType({
    LogLevel.DEBUG: Fore.CYAN,
    LogLevel.INFO: Fore.BLUE,
    LogLevel.SUCCESS: Fore.GREEN,
    LogLevel.WARNING: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED,
})
