from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .compat import tomllib
from .defaults import DEFAULT_CONFIG
from .exceptions import ConfigIOError, ConfigValidationError
from .validation import validate_config

logger = logging.getLogger(__name__)


class ConfigStorage:
    """Filesystem access for the TOML configuration file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = (path or self._determine_default_path()).expanduser().resolve()

    @staticmethod
    def _determine_default_path() -> Path:
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
            return base / "textenc" / "config.toml"
        return Path.home() / ".config" / "textenc" / "config.toml"

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read_config(self) -> Dict[str, Any]:
        try:
            with self._path.open("rb") as fh:
                return tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigValidationError(f"{self._path}: invalid TOML: {exc}") from exc
        except OSError as exc:
            raise ConfigIOError(f"Unable to read configuration {self._path}: {exc}") from exc


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(path: Optional[Path] = None, *, required: bool = False) -> Dict[str, Any]:
    """Load, validate and merge the configuration file over the defaults.

    A missing file yields the defaults unless ``required`` is set, in which
    case :class:`ConfigIOError` is raised. An explicitly passed path is
    always required.
    """

    storage = ConfigStorage(path)
    if not storage.exists():
        if required or path is not None:
            raise ConfigIOError(f"Configuration file not found: {storage.path}")
        logger.debug("No configuration file at %s; using defaults", storage.path)
        return copy.deepcopy(DEFAULT_CONFIG)

    loaded = storage.read_config()
    validate_config(loaded)
    logger.debug("Loaded configuration from %s", storage.path)
    return _merge(DEFAULT_CONFIG, loaded)


__all__ = ["ConfigStorage", "load_config"]
