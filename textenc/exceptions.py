from __future__ import annotations


class TextencError(Exception):
    """Base exception for textenc errors."""


class UnknownEncodingError(TextencError, LookupError):
    """Raised when an encoding name is not known to the codec registry."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"unknown encoding: {encoding!r}")
        self.encoding = encoding


class ScanError(TextencError):
    """Raised when a source file cannot be scanned."""


__all__ = ["TextencError", "UnknownEncodingError", "ScanError"]
