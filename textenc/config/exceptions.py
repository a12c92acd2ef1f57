from __future__ import annotations

from ..exceptions import TextencError


class ConfigError(TextencError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""


class ConfigIOError(ConfigError):
    """Raised when configuration read/write fails."""


__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConfigIOError",
]
