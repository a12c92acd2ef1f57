"""Process-wide runtime flags, captured once and passed around explicitly."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

WARN_DEFAULT_ENCODING_ENV = "PYTHONWARNDEFAULTENCODING"
UTF8_MODE_ENV = "PYTHONUTF8"
WARN_DEFAULT_ENCODING_XOPTION = "warn_default_encoding"
UTF8_XOPTION = "utf8"


@dataclass(frozen=True)
class RuntimeFlags:
    warn_default_encoding: bool = False
    utf8_mode: bool = False
    warning_action: str = "default"

    def with_overrides(self, **changes: Any) -> "RuntimeFlags":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_sources(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        xoptions: Optional[Mapping[str, Any]] = None,
        config: Optional[Mapping[str, Any]] = None,
        warn_default_encoding: Optional[bool] = None,
    ) -> "RuntimeFlags":
        """Combine every source of the flags.

        Precedence for ``warn_default_encoding``: the explicit argument (the
        CLI switch), then ``-X warn_default_encoding``, then the
        ``PYTHONWARNDEFAULTENCODING`` environment variable, then the
        configuration file.
        """

        environ = os.environ if environ is None else environ
        xoptions = {} if xoptions is None else xoptions
        section = dict((config or {}).get("warnings", {}))

        warn = bool(section.get("warn_default_encoding", False))
        if environ.get(WARN_DEFAULT_ENCODING_ENV):
            warn = True
        if WARN_DEFAULT_ENCODING_XOPTION in xoptions:
            warn = True
        if warn_default_encoding is not None:
            warn = warn_default_encoding

        utf8 = bool(section.get("utf8_mode", False))
        env_utf8 = environ.get(UTF8_MODE_ENV)
        if env_utf8 in ("0", "1"):
            utf8 = env_utf8 == "1"
        if UTF8_XOPTION in xoptions:
            utf8 = xoptions[UTF8_XOPTION] in (True, "1", "")

        return cls(
            warn_default_encoding=warn,
            utf8_mode=utf8,
            warning_action=str(section.get("action", "default")),
        )

    @classmethod
    def from_interpreter(cls) -> "RuntimeFlags":
        """Flags of the running interpreter and its environment."""
        flags = cls.from_sources(os.environ, getattr(sys, "_xoptions", {}))
        return flags.with_overrides(
            warn_default_encoding=bool(getattr(sys.flags, "warn_default_encoding", 0))
            or flags.warn_default_encoding,
            utf8_mode=bool(sys.flags.utf8_mode) or flags.utf8_mode,
        )


def parse_xoptions(values: Iterable[str]) -> dict:
    """Turn ``-X name[=value]`` arguments into a mapping like ``sys._xoptions``."""
    options: dict = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        options[name.strip()] = value if sep else True
    return options


@lru_cache(maxsize=1)
def get_runtime_flags() -> RuntimeFlags:
    flags = RuntimeFlags.from_interpreter()
    logger.debug("Runtime flags: %s", flags)
    return flags


__all__ = [
    "RuntimeFlags",
    "UTF8_MODE_ENV",
    "WARN_DEFAULT_ENCODING_ENV",
    "get_runtime_flags",
    "parse_xoptions",
]
