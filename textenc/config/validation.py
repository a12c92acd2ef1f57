from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from .defaults import CONFIG_SCHEMA
from .exceptions import ConfigValidationError

_validator = Draft202012Validator(CONFIG_SCHEMA)


def collect_errors(data: Dict[str, Any]) -> List[str]:
    messages: List[str] = []
    for error in sorted(_validator.iter_errors(data), key=lambda e: list(e.path)):
        location = ".".join(str(part) for part in error.path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return messages


def validate_config(data: Dict[str, Any]) -> None:
    """Raise :class:`ConfigValidationError` listing every schema violation."""
    errors = collect_errors(data)
    if errors:
        raise ConfigValidationError("; ".join(errors))


__all__ = ["collect_errors", "validate_config"]
