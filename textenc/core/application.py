import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..cli.parser import parse_arguments
from ..config import ConfigError, RuntimeFlags, load_config, parse_xoptions
from ..encoding.advisory import OmittedEncodingWarning, install_warning_filter
from ..encoding.hints import is_auto_selector, normalize_encoding_hint
from ..encoding.locale_encoding import effective_encoding
from ..encoding.resolver import EncodingResolver
from ..exceptions import TextencError
from ..scan import scan_paths, write_report
from ..services.logging.logging_service import setup_logging
from ..textio import read_text

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_runtime_flags(args, config: Dict[str, Any]) -> RuntimeFlags:
    """Flags for this run: CLI switches over interpreter, environment and config."""
    xoptions = dict(getattr(sys, "_xoptions", {}))
    xoptions.update(parse_xoptions(args.xoptions))
    flags = RuntimeFlags.from_sources(os.environ, xoptions, config, args.warn_default_encoding)

    if args.warn_default_encoding is None and getattr(sys.flags, "warn_default_encoding", 0):
        flags = flags.with_overrides(warn_default_encoding=True)
    if sys.flags.utf8_mode and "utf8" not in xoptions:
        flags = flags.with_overrides(utf8_mode=True)
    return flags.with_overrides(warning_action=args.warning_action)


def _configure_logging(args, config: Optional[Dict[str, Any]] = None) -> None:
    section = (config or {}).get("logging", {})
    verbose = args.verbose if args.verbose is not None else bool(section.get("verbose", False))
    log_file = args.log_file or section.get("log_file") or None

    color = section.get("color", "auto")
    force_color = {"always": True, "never": False}.get(color)
    if args.no_color:
        force_color = False

    setup_logging(verbose=verbose, log_file=log_file, force_color=force_color)


def cmd_resolve(args, flags: RuntimeFlags) -> int:
    resolver = EncodingResolver(flags)
    selector = resolver.resolve(normalize_encoding_hint(args.encoding), stacklevel=1)
    if is_auto_selector(selector):
        print(f"{selector} -> detected from content")
        return EXIT_OK
    print(f"{selector} -> {effective_encoding(selector, flags)}")
    return EXIT_OK


def cmd_cat(args, flags: RuntimeFlags) -> int:
    text = read_text(
        args.file,
        encoding=normalize_encoding_hint(args.encoding),
        errors=args.errors,
        flags=flags,
    )
    sys.stdout.write(text)
    return EXIT_OK


def cmd_scan(args, flags: RuntimeFlags, config: Dict[str, Any]) -> int:
    section = config.get("scan", {})
    excluded_folders = args.exclude_folders
    if excluded_folders is None:
        excluded_folders = section.get("exclude_folders", [])
    exclude_patterns = args.exclude_patterns
    if exclude_patterns is None:
        exclude_patterns = section.get("exclude_patterns", [])
    fmt = args.format or section.get("format", "text")

    report = scan_paths(
        [Path(p) for p in args.paths],
        excluded_folders=set(excluded_folders),
        exclude_patterns=exclude_patterns,
        show_progress=not args.no_progress and sys.stderr.isatty(),
    )
    write_report(report, fmt, args.output)

    if report.findings:
        logger.warning("%d call(s) without an explicit encoding", len(report.findings))
    return EXIT_OK if report.ok else EXIT_FAILURE


COMMANDS = {
    "resolve": cmd_resolve,
    "cat": cmd_cat,
}


def run(argv: Optional[list] = None) -> int:
    args = parse_arguments(argv)
    _configure_logging(args)

    config_path = Path(args.config).expanduser() if args.config else None
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return EXIT_USAGE

    if args.config_validate:
        print("Configuration is valid.")
        return EXIT_OK

    _configure_logging(args, config)
    flags = build_runtime_flags(args, config)
    install_warning_filter(flags.warning_action)
    logger.debug("Running '%s' with %s", args.command, flags)

    try:
        if args.command == "scan":
            return cmd_scan(args, flags, config)
        return COMMANDS[args.command](args, flags)
    except OmittedEncodingWarning as exc:
        # only raised when the warning action is "error"
        logger.error("%s", exc)
    except (TextencError, LookupError, UnicodeError, OSError) as exc:
        logger.error("%s", exc)
    return EXIT_FAILURE
