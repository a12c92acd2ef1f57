from __future__ import annotations

from .exceptions import ConfigError, ConfigIOError, ConfigValidationError
from .flags import RuntimeFlags, get_runtime_flags, parse_xoptions
from .storage import ConfigStorage, load_config

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigStorage",
    "ConfigValidationError",
    "RuntimeFlags",
    "get_runtime_flags",
    "load_config",
    "parse_xoptions",
]
