from __future__ import annotations

import codecs
import locale
from typing import Optional

from ..config.flags import RuntimeFlags, get_runtime_flags
from ..exceptions import UnknownEncodingError
from .resolver import LOCALE_ENCODING


def is_locale_selector(selector: Optional[str]) -> bool:
    return selector is not None and selector.strip().lower() == LOCALE_ENCODING


def canonical_name(encoding: str) -> str:
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        raise UnknownEncodingError(encoding) from exc


def locale_preferred_encoding(flags: Optional[RuntimeFlags] = None) -> str:
    if flags is None:
        flags = get_runtime_flags()
    if flags.utf8_mode:
        return "utf-8"
    return canonical_name(locale.getpreferredencoding(False))


def effective_encoding(selector: Optional[str], flags: Optional[RuntimeFlags] = None) -> str:
    """Map a resolved selector to a codec name usable by ``open``.

    ``"locale"`` is already resolved, so it never triggers the omitted-encoding
    warning here.
    """

    if selector is None:
        raise ValueError("selector must be resolved with text_encoding() first")
    if is_locale_selector(selector):
        return locale_preferred_encoding(flags)
    return canonical_name(selector)


__all__ = [
    "canonical_name",
    "effective_encoding",
    "is_locale_selector",
    "locale_preferred_encoding",
]
