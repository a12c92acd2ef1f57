"""Resolve an optional ``encoding`` argument to a concrete selector."""

from __future__ import annotations

import warnings
from typing import Optional

from ..config.flags import RuntimeFlags, get_runtime_flags
from .advisory import OMITTED_ENCODING_MESSAGE, OmittedEncodingWarning

LOCALE_ENCODING = "locale"


def _check_stacklevel(stacklevel: int) -> None:
    if isinstance(stacklevel, bool) or not isinstance(stacklevel, int) or stacklevel < 1:
        raise ValueError(f"stacklevel must be a positive integer, got {stacklevel!r}")


def text_encoding(
    encoding: Optional[str],
    stacklevel: int = 2,
    *,
    flags: Optional[RuntimeFlags] = None,
) -> str:
    """Choose the text encoding for an API taking ``encoding=None``.

    A given ``encoding`` is returned as is. ``None`` becomes ``"locale"``
    and, when ``flags.warn_default_encoding`` is set, an
    :class:`OmittedEncodingWarning` is emitted ``stacklevel`` frames above
    this function. The default of 2 blames the caller of the API that
    called us.
    """

    _check_stacklevel(stacklevel)
    if encoding is not None:
        return encoding
    if flags is None:
        flags = get_runtime_flags()
    if flags.warn_default_encoding:
        warnings.warn(OMITTED_ENCODING_MESSAGE, OmittedEncodingWarning, stacklevel + 1)
    return LOCALE_ENCODING


class EncodingResolver:
    """:func:`text_encoding` bound to one set of flags."""

    def __init__(self, flags: RuntimeFlags) -> None:
        self._flags = flags

    @property
    def flags(self) -> RuntimeFlags:
        return self._flags

    def resolve(self, encoding: Optional[str], stacklevel: int = 2) -> str:
        _check_stacklevel(stacklevel)
        # one extra frame for this method
        return text_encoding(encoding, stacklevel + 1, flags=self._flags)


__all__ = ["EncodingResolver", "LOCALE_ENCODING", "text_encoding"]
