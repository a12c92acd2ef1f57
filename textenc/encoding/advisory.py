"""Warning category emitted when a text encoding is left implicit."""

from __future__ import annotations

import logging
import warnings

logger = logging.getLogger(__name__)

WARNING_ACTIONS = ("default", "always", "once", "module", "error", "ignore")

OMITTED_ENCODING_MESSAGE = "'encoding' argument not specified."


class OmittedEncodingWarning(EncodingWarning):
    """Emitted when a text I/O call falls back to the locale encoding.

    Subclasses the builtin :class:`EncodingWarning` so existing filters such as
    ``-W error::EncodingWarning`` keep working.
    """


def install_warning_filter(action: str = "default") -> None:
    """Register a filter so omitted-encoding warnings are shown.

    Unlike ``DeprecationWarning`` the category is displayed by default; the
    filter is installed explicitly so a surrounding ``ignore`` rule for plain
    warnings does not hide it.
    """

    if action not in WARNING_ACTIONS:
        raise ValueError(
            f"invalid warning action {action!r}; expected one of {', '.join(WARNING_ACTIONS)}"
        )
    warnings.filterwarnings(action, category=OmittedEncodingWarning)
    logger.debug("Installed '%s' filter for %s", action, OmittedEncodingWarning.__name__)


__all__ = [
    "OMITTED_ENCODING_MESSAGE",
    "OmittedEncodingWarning",
    "WARNING_ACTIONS",
    "install_warning_filter",
]
