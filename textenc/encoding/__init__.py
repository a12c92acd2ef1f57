from __future__ import annotations

from .advisory import OmittedEncodingWarning, install_warning_filter
from .hints import AUTO_ENCODING, detect_encoding, normalize_encoding_hint
from .locale_encoding import effective_encoding, is_locale_selector
from .resolver import LOCALE_ENCODING, EncodingResolver, text_encoding

__all__ = [
    "AUTO_ENCODING",
    "EncodingResolver",
    "LOCALE_ENCODING",
    "OmittedEncodingWarning",
    "detect_encoding",
    "effective_encoding",
    "install_warning_filter",
    "is_locale_selector",
    "normalize_encoding_hint",
    "text_encoding",
]
