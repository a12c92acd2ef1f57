# textenc/services/logging/formatters/color_formatter.py

import logging
from typing import Any, Dict

from colorama import Fore

from ....utils.color_support import color_support

# Logger used by logging.captureWarnings()
WARNINGS_LOGGER = 'py.warnings'


class ColorFormatter(logging.Formatter):
    """
    Console formatter that colors the level name and message.

    Records coming from captured warnings are rendered on one line and
    highlighted, so an omitted-encoding warning stands out from regular log
    output.
    """

    LEVEL_STYLES: Dict[str, Dict[str, Any]] = {
        'DEBUG': {'color': Fore.CYAN},
        'INFO': {'color': Fore.GREEN},
        'WARNING': {'color': Fore.YELLOW, 'bright': True},
        'ERROR': {'color': Fore.RED, 'bright': True},
        'CRITICAL': {'color': Fore.MAGENTA, 'bright': True},
    }

    def __init__(self, fmt: str = None, datefmt: str = None):
        super().__init__(
            fmt or '%(asctime)s [%(levelname)s] %(message)s',
            datefmt or '%Y-%m-%d %H:%M:%S',
        )

    @staticmethod
    def _flatten_warning(message: str) -> str:
        # warnings.formatwarning() appends the offending source line
        first_line = message.strip().splitlines()[0] if message.strip() else message
        return first_line

    def format(self, record: logging.LogRecord) -> str:
        orig_msg = record.msg
        orig_args = record.args
        orig_levelname = record.levelname

        try:
            if record.name == WARNINGS_LOGGER:
                # Python 3.10 logs the warning as ("%s", text)
                record.msg = self._flatten_warning(record.getMessage())
                record.args = None

            if color_support.supports_color():
                style = self.LEVEL_STYLES.get(record.levelname, {})
                record.levelname = color_support.colored(
                    record.levelname,
                    color=style.get('color'),
                    bright=style.get('bright', False),
                )
                if record.name == WARNINGS_LOGGER and isinstance(record.msg, str):
                    record.msg = color_support.colored(record.msg, Fore.YELLOW, bright=True)

            return super().format(record)
        finally:
            record.msg = orig_msg
            record.args = orig_args
            record.levelname = orig_levelname
