from __future__ import annotations

from typing import Any, Dict

from .compat import tomllib

DEFAULT_CONFIG_TOML = """\
config_version = "1.0"

[warnings]
# Emit OmittedEncodingWarning when a text I/O call omits its encoding
warn_default_encoding = false
# Filter action for the warning: default, always, once, module, error, ignore
action = "default"
# Resolve the "locale" selector to UTF-8
utf8_mode = false

[scan]
format = "text"
exclude_folders = [".git", "__pycache__", ".venv", "venv", "build", "dist", "node_modules", ".tox"]
exclude_patterns = ["*.egg-info"]

[logging]
verbose = false
log_file = ""
color = "auto"
"""

DEFAULT_CONFIG: Dict[str, Any] = tomllib.loads(DEFAULT_CONFIG_TOML)

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "config_version": {"type": "string"},
        "warnings": {
            "type": "object",
            "properties": {
                "warn_default_encoding": {"type": "boolean"},
                "action": {
                    "type": "string",
                    "enum": ["default", "always", "once", "module", "error", "ignore"],
                },
                "utf8_mode": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "scan": {
            "type": "object",
            "properties": {
                "format": {"type": "string", "enum": ["text", "json", "yaml"]},
                "exclude_folders": _STRING_LIST,
                "exclude_patterns": _STRING_LIST,
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "verbose": {"type": "boolean"},
                "log_file": {"type": "string"},
                "color": {"type": "string", "enum": ["auto", "always", "never"]},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


__all__ = ["DEFAULT_CONFIG", "DEFAULT_CONFIG_TOML", "CONFIG_SCHEMA"]
