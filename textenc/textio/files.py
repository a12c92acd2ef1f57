"""Text I/O helpers that make the locale fallback explicit.

Every helper accepts ``encoding=None`` and hands it to :func:`text_encoding`
with ``stacklevel=2`` so an omitted-encoding warning points at the code that
called the helper, not at this module.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import IO, BinaryIO, Optional, TextIO, Union

from ..config.flags import RuntimeFlags
from ..encoding.hints import detect_encoding, is_auto_selector
from ..encoding.locale_encoding import effective_encoding
from ..encoding.resolver import text_encoding

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, os.PathLike]


def _codec_for(selector: str, flags: Optional[RuntimeFlags]) -> str:
    if is_auto_selector(selector):
        raise ValueError("automatic detection needs the whole content; use read_text()")
    return effective_encoding(selector, flags)


def open_text(
    file: Union[PathLike, int],
    mode: str = "r",
    buffering: int = -1,
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
    newline: Optional[str] = None,
    *,
    flags: Optional[RuntimeFlags] = None,
) -> TextIO:
    """``open()`` restricted to text modes."""
    if "b" in mode:
        raise ValueError(f"open_text() does not accept binary mode {mode!r}")
    selector = text_encoding(encoding, 2, flags=flags)
    codec = _codec_for(selector, flags)
    logger.debug("Opening %r in mode %r with encoding %s", file, mode, codec)
    return open(file, mode, buffering, encoding=codec, errors=errors, newline=newline)


def wrap_text(
    buffer: Union[BinaryIO, IO[bytes]],
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
    newline: Optional[str] = None,
    line_buffering: bool = False,
    *,
    flags: Optional[RuntimeFlags] = None,
) -> io.TextIOWrapper:
    selector = text_encoding(encoding, 2, flags=flags)
    return io.TextIOWrapper(
        buffer,
        encoding=_codec_for(selector, flags),
        errors=errors,
        newline=newline,
        line_buffering=line_buffering,
    )


def _decode(data: bytes, selector: str, errors: Optional[str], flags: Optional[RuntimeFlags]) -> str:
    if is_auto_selector(selector):
        codec = detect_encoding(data)
    else:
        codec = effective_encoding(selector, flags)
    return data.decode(codec, errors or "strict")


def decode_bytes(
    data: bytes,
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
    *,
    flags: Optional[RuntimeFlags] = None,
) -> str:
    """Decode ``data``; ``encoding="auto"`` detects the codec first."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
    selector = text_encoding(encoding, 2, flags=flags)
    return _decode(bytes(data), selector, errors, flags)


def read_text(
    path: PathLike,
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
    *,
    flags: Optional[RuntimeFlags] = None,
) -> str:
    selector = text_encoding(encoding, 2, flags=flags)
    if is_auto_selector(selector):
        return _decode(Path(os.fsdecode(path)).read_bytes(), selector, errors, flags)
    # selector is resolved; open_text must not warn a second time
    with open_text(path, "r", encoding=selector, errors=errors, flags=flags) as fh:
        return fh.read()


def write_text(
    path: PathLike,
    data: str,
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
    newline: Optional[str] = None,
    *,
    flags: Optional[RuntimeFlags] = None,
) -> int:
    if not isinstance(data, str):
        raise TypeError(f"data must be str, not {type(data).__name__}")
    selector = text_encoding(encoding, 2, flags=flags)
    with open_text(path, "w", encoding=selector, errors=errors, newline=newline, flags=flags) as fh:
        return fh.write(data)


__all__ = [
    "decode_bytes",
    "open_text",
    "read_text",
    "wrap_text",
    "write_text",
]
