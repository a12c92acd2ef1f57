"""Utilities for working with user supplied encoding hints."""

from __future__ import annotations

import logging
from codecs import lookup
from typing import Optional

import charset_normalizer

from .resolver import LOCALE_ENCODING

logger = logging.getLogger(__name__)

AUTO_ENCODING = "auto"

_AUTO_ENCODING_ALIASES = {
    "auto",
    "automatic",
    "auto-detect",
    "autodetect",
    "detect",
}


def is_auto_selector(selector: Optional[str]) -> bool:
    return selector is not None and selector.strip().lower() in _AUTO_ENCODING_ALIASES


def normalize_encoding_hint(value: Optional[str]) -> Optional[str]:
    """Normalize a user-provided encoding hint.

    ``None`` and empty strings are treated as ``None``, meaning the hint was
    omitted. Aliases that ask for detection (e.g. ``"auto-detect"``) become
    ``"auto"`` and ``"locale"`` is kept as the sentinel. If the name is
    unknown to Python's codec registry we emit a warning and fall back to
    detection.
    """

    if value is None:
        return None

    normalized = value.strip()
    if not normalized:
        return None

    lowered = normalized.lower()
    if lowered in _AUTO_ENCODING_ALIASES:
        logger.debug("Encoding hint '%s' resolved to automatic detection", value)
        return AUTO_ENCODING
    if lowered == LOCALE_ENCODING:
        return LOCALE_ENCODING

    try:
        lookup(normalized)
    except LookupError:
        logger.warning(
            "Unknown encoding hint '%s'; falling back to automatic detection", value
        )
        return AUTO_ENCODING

    return normalized


def detect_encoding(data: bytes, default: str = "utf-8") -> str:
    """Best guess for the encoding of ``data`` via charset-normalizer."""
    if not data:
        return default

    best = charset_normalizer.from_bytes(data).best()
    if best is None or not best.encoding:
        logger.warning("Could not detect encoding; falling back to '%s'", default)
        return default

    logger.debug(
        "Detected encoding '%s' (chaos %.1f%%)", best.encoding, best.percent_chaos
    )
    return best.encoding


__all__ = [
    "AUTO_ENCODING",
    "detect_encoding",
    "is_auto_selector",
    "normalize_encoding_hint",
]
