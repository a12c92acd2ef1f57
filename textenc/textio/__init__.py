from __future__ import annotations

from .files import decode_bytes, open_text, read_text, wrap_text, write_text

__all__ = ["decode_bytes", "open_text", "read_text", "wrap_text", "write_text"]
