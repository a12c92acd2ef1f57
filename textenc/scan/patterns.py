import fnmatch
import logging
import re
from functools import lru_cache
from typing import Pattern, Sequence

from colorama import Fore, Style

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def compile_regex(pattern: str) -> Pattern:
    """Compile and cache a ``regex:`` exclusion pattern."""
    return re.compile(pattern)


def matches_patterns(name: str, patterns: Sequence[str]) -> bool:
    """Check a file or folder name against glob and ``regex:`` patterns."""
    for pattern in patterns:
        if pattern.startswith("regex:"):
            regex = pattern[len("regex:"):]
            try:
                if compile_regex(regex).match(name):
                    return True
            except re.error as e:
                logger.error(f"{Fore.RED}Invalid regex pattern '{regex}': {e}{Style.RESET_ALL}")
        elif fnmatch.fnmatch(name, pattern):
            return True
    return False
