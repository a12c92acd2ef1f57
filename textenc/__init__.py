"""Make the locale encoding fallback of text I/O visible."""

from __future__ import annotations

from .config.flags import RuntimeFlags, get_runtime_flags
from .encoding import (
    AUTO_ENCODING,
    LOCALE_ENCODING,
    EncodingResolver,
    OmittedEncodingWarning,
    effective_encoding,
    install_warning_filter,
    text_encoding,
)
from .exceptions import ScanError, TextencError, UnknownEncodingError
from .textio import decode_bytes, open_text, read_text, wrap_text, write_text

__version__ = "1.0.0"

__all__ = [
    "AUTO_ENCODING",
    "EncodingResolver",
    "LOCALE_ENCODING",
    "OmittedEncodingWarning",
    "RuntimeFlags",
    "ScanError",
    "TextencError",
    "UnknownEncodingError",
    "decode_bytes",
    "effective_encoding",
    "get_runtime_flags",
    "install_warning_filter",
    "open_text",
    "read_text",
    "text_encoding",
    "wrap_text",
    "write_text",
]
