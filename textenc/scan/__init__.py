from __future__ import annotations

from .finder import Finding, find_omitted_encodings
from .report import REPORT_FORMATS, render_report, write_report
from .scanner import ScanReport, scan_file, scan_paths
from .traversal import iter_python_files

__all__ = [
    "Finding",
    "REPORT_FORMATS",
    "ScanReport",
    "find_omitted_encodings",
    "iter_python_files",
    "render_report",
    "scan_file",
    "scan_paths",
    "write_report",
]
