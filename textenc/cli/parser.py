import argparse
from typing import Optional

from ..encoding.advisory import WARNING_ACTIONS
from ..scan.report import REPORT_FORMATS


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="textenc",
        description=(
            "Resolve text encodings, read files and find text I/O calls that "
            "silently fall back to the locale encoding."
        ),
        epilog=(
            "Examples:\n"
            "  textenc resolve\n"
            "  textenc --warn-default-encoding resolve\n"
            "  textenc resolve cp1252\n"
            "  textenc cat notes.txt --encoding auto\n"
            "  textenc scan src tests --format json -o report.json\n"
            "  textenc -X warn_default_encoding --warning-action error cat notes.txt\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--config", type=str, default=None, help="Path to the configuration file")
    parser.add_argument(
        "--config-validate",
        action="store_true",
        help="Validate the configuration file and exit.",
    )
    parser.add_argument(
        "-X",
        dest="xoptions",
        action="append",
        default=[],
        metavar="OPTION",
        help="Interpreter style option, e.g. 'warn_default_encoding' or 'utf8'.",
    )
    warn_group = parser.add_mutually_exclusive_group()
    warn_group.add_argument(
        "--warn-default-encoding",
        dest="warn_default_encoding",
        action="store_true",
        default=None,
        help="Emit an EncodingWarning whenever an encoding is omitted.",
    )
    warn_group.add_argument(
        "--no-warn-default-encoding",
        dest="warn_default_encoding",
        action="store_false",
        help="Never emit the omitted-encoding warning.",
    )
    parser.add_argument(
        "--warning-action",
        choices=WARNING_ACTIONS,
        default=None,
        help="Filter action for omitted-encoding warnings (default from configuration).",
    )
    parser.add_argument("--verbose", action="store_true", default=None, help="Enables verbose logging.")
    parser.add_argument("--log-file", type=str, default=None, help="Path to the log file.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    resolve_parser = subparsers.add_parser("resolve", help="Show how an encoding selector resolves.")
    resolve_parser.add_argument("encoding", nargs="?", default=None, help="Encoding name; omit to use the default.")

    cat_parser = subparsers.add_parser("cat", help="Print a text file.")
    cat_parser.add_argument("file", type=str, help="File to read.")
    cat_parser.add_argument("--encoding", type=str, default=None, help="Encoding, 'locale' or 'auto'.")
    cat_parser.add_argument("--errors", type=str, default=None, help="Decoding error handler (e.g. 'replace').")

    scan_parser = subparsers.add_parser("scan", help="Find text I/O calls without an explicit encoding.")
    scan_parser.add_argument("paths", nargs="+", help="Files or directories to scan.")
    scan_parser.add_argument("-f", "--format", choices=REPORT_FORMATS, default=None, help="Report format.")
    scan_parser.add_argument("-o", "--output", type=str, default=None, help="Write the report to a file.")
    scan_parser.add_argument(
        "--exclude-folders",
        nargs="*",
        default=None,
        help="Folder names to skip (default from configuration).",
    )
    scan_parser.add_argument(
        "--exclude-patterns",
        nargs="*",
        default=None,
        help="Glob or 'regex:' patterns to skip.",
    )
    scan_parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")

    args = parser.parse_args(argv)

    if not args.config_validate and args.command is None:
        parser.error("a command is required unless running --config-validate.")

    return args
