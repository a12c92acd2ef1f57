from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Set
import logging

from colorama import Fore, Style

from .patterns import matches_patterns

logger = logging.getLogger(__name__)

PYTHON_SUFFIXES = {".py", ".pyw", ".pyi"}


@dataclass
class TraversalCounters:
    """Mutable counters that track traversal statistics."""

    included: int = 0
    excluded: int = 0


def iter_python_files(
    paths: Iterable[Path],
    excluded_folders: Set[str],
    exclude_patterns: Sequence[str],
    counters: Optional[TraversalCounters] = None,
) -> Iterator[Path]:
    """Yield Python source files below ``paths`` in a stable order.

    Files named explicitly are always yielded, whatever their suffix. Symbolic
    links to directories are not followed.
    """

    counters = counters if counters is not None else TraversalCounters()

    for root in paths:
        if root.is_file():
            counters.included += 1
            yield root
            continue
        if not root.is_dir():
            logger.error(f"{Fore.RED}No such file or directory: {root}{Style.RESET_ALL}")
            continue

        stack = [root]
        while stack:
            current = stack.pop()
            try:
                entries = sorted(current.iterdir())
            except OSError as e:
                logger.error(f"{Fore.RED}Cannot list {current}: {e}{Style.RESET_ALL}")
                continue

            subdirs = []
            for entry in entries:
                if entry.is_dir() and not entry.is_symlink():
                    if entry.name in excluded_folders or matches_patterns(entry.name, exclude_patterns):
                        logger.debug(f"{Fore.CYAN}Excluded folder: {entry}{Style.RESET_ALL}")
                        counters.excluded += 1
                        continue
                    subdirs.append(entry)
                elif entry.is_file() and entry.suffix in PYTHON_SUFFIXES:
                    if matches_patterns(entry.name, exclude_patterns):
                        counters.excluded += 1
                        continue
                    counters.included += 1
                    yield entry
            stack.extend(reversed(subdirs))
