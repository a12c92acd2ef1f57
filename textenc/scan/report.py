# textenc/scan/report.py

import json
import logging
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO

import yaml
from colorama import Fore, Style

from .scanner import ScanReport

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("text", "json", "yaml")


def render_report(report: ScanReport, fmt: str = "text") -> str:
    """Serialise a scan report as plain text, JSON or YAML."""
    if fmt == "text":
        lines = [str(finding) for finding in report.findings]
        lines.extend(f"{path}: error: {message}" for path, message in report.errors.items())
        lines.append(
            f"{len(report.findings)} omitted encoding(s) in {report.files_scanned} file(s)"
        )
        return "\n".join(lines) + "\n"
    if fmt == "json":
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(
            report.to_dict(),
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        )
    raise ValueError(f"Unsupported report format: {fmt}")


def write_report(
    report: ScanReport,
    fmt: str = "text",
    output_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Write the report to ``output_file`` atomically, or to ``stream``."""
    rendered = render_report(report, fmt)
    if output_file is None:
        (stream or sys.stdout).write(rendered)
        return

    target = Path(output_file)
    temp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", delete=False, dir=target.parent, encoding="utf-8", suffix=".tmp"
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(rendered)
        shutil.move(str(temp_path), str(target))
    except OSError as e:
        logger.error(f"{Fore.RED}Error writing report file '{output_file}': {e}{Style.RESET_ALL}")
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        raise
    logger.debug("Report written to '%s'.", output_file)
