from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

from tqdm import tqdm

from ..exceptions import ScanError
from .finder import Finding, find_omitted_encodings
from .traversal import TraversalCounters, iter_python_files

logger = logging.getLogger(__name__)


@dataclass
class ScanReport:
    findings: List[Finding] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)
    files_scanned: int = 0
    files_excluded: int = 0

    @property
    def ok(self) -> bool:
        return not self.findings and not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": {
                "files_scanned": self.files_scanned,
                "files_excluded": self.files_excluded,
                "findings": len(self.findings),
                "errors": len(self.errors),
            },
            "findings": [finding.to_dict() for finding in self.findings],
            "errors": dict(self.errors),
        }


def scan_file(path: Path) -> List[Finding]:
    """Scan one file; the source is decoded by the parser (PEP 263 cookies apply)."""
    try:
        source = path.read_bytes()
    except OSError as exc:
        raise ScanError(f"{path}: cannot read: {exc}") from exc
    return find_omitted_encodings(source, str(path))


def scan_paths(
    paths: Iterable[Path],
    excluded_folders: Optional[Set[str]] = None,
    exclude_patterns: Sequence[str] = (),
    show_progress: bool = False,
) -> ScanReport:
    report = ScanReport()
    counters = TraversalCounters()
    files = iter_python_files(
        [Path(p) for p in paths],
        excluded_folders or set(),
        list(exclude_patterns),
        counters,
    )

    with tqdm(files, desc="Scanning", unit="file", disable=not show_progress) as progress:
        for path in progress:
            try:
                report.findings.extend(scan_file(path))
            except ScanError as exc:
                logger.error("%s", exc)
                report.errors[str(path)] = str(exc)
            report.files_scanned += 1

    report.files_excluded = counters.excluded
    logger.debug(
        "Scanned %d files (%d excluded): %d findings, %d errors",
        report.files_scanned,
        report.files_excluded,
        len(report.findings),
        len(report.errors),
    )
    return report


__all__ = ["ScanReport", "scan_file", "scan_paths"]
