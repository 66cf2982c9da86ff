from __future__ import annotations

from .core.locking import LockedLogger
from .core.logger import Logger
from .core.tags import Tag
from .domain.config import LoggerConfig, build_config_from_dict, load_config
from .domain.levels import LogLevel, level_name, parse_level

__version__ = "0.1.0"

__all__ = [
    "Logger",
    "LockedLogger",
    "LogLevel",
    "LoggerConfig",
    "Tag",
    "build_config_from_dict",
    "load_config",
    "level_name",
    "parse_level",
]
