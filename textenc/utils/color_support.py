# textenc/utils/color_support.py

import os
import sys
from functools import lru_cache
from typing import Optional

from colorama import Fore, Style
from colorama import init as colorama_init


class ColorSupport:
    """Decides whether console output is colored and applies the colors."""

    def __init__(self):
        self._force_color: Optional[bool] = self._get_env_force_color()
        self._init_colorama()

    @staticmethod
    def _get_env_force_color() -> Optional[bool]:
        if os.environ.get('NO_COLOR') is not None:
            return False
        if os.environ.get('FORCE_COLOR', '').lower() in ('1', 'true', 'yes'):
            return True
        return None

    def _init_colorama(self) -> None:
        colorama_init(strip=not self.supports_color(), convert=True, wrap=True, autoreset=True)

    def set_force_color(self, force: Optional[bool]) -> None:
        """Force colors on (``True``), off (``False``) or back to detection (``None``)."""
        if force not in (True, False, None):
            raise ValueError("force must be True, False or None")

        target = self._get_env_force_color() if force is None else force
        if target == self._force_color:
            return

        self._force_color = target
        self.supports_color.cache_clear()
        self._init_colorama()

    @lru_cache(maxsize=1)
    def supports_color(self) -> bool:
        if self._force_color is not None:
            return self._force_color

        term = os.environ.get('TERM', '').lower()
        if 'dumb' in term:
            return False

        if sys.platform == 'win32':
            return (
                'WT_SESSION' in os.environ
                or 'ANSICON' in os.environ
                or os.environ.get('TERM_PROGRAM', '') == 'vscode'
            )

        stream = sys.stderr
        return bool(hasattr(stream, 'isatty') and stream.isatty())

    def colored(self, text: str, color: Optional[str] = None, bright: bool = False) -> str:
        if not text or not self.supports_color():
            return text
        prefix = (Style.BRIGHT if bright else '') + (color or '')
        return f"{prefix}{text}{Style.RESET_ALL}"

    def error(self, text: str) -> str:
        return self.colored(text, Fore.RED)

    def warning(self, text: str) -> str:
        return self.colored(text, Fore.YELLOW)

    def success(self, text: str) -> str:
        return self.colored(text, Fore.GREEN)


# Global instance
color_support = ColorSupport()
