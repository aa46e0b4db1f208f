"""
Command-line entry point for the event consistency checker.

Usage:
    event-consistency event_a.json event_b.json
    event-consistency --example --format markdown
    cat event_b.json | event-consistency event_a.json - --format json

Exit codes:
    0  comparison produced (whatever the grade)
    1  malformed event, unreadable file, or configuration error
    2  usage error
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from event_consistency.checker import ConsistencyChecker, load_example_pair
from event_consistency.config.settings import Settings
from event_consistency.exceptions import ConfigurationError, MalformedEventError
from event_consistency.reporting.formatter import format_parse_errors
from event_consistency.reporting.reporter import REPORT_FORMATS, ResultReporter
from event_consistency.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)

STDIN_MARKER = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="event-consistency",
        description="Compare two JSON events and grade how consistently they describe the same concept.",
    )
    parser.add_argument("event_a", nargs="?", help="Event A JSON file ('-' for stdin)")
    parser.add_argument("event_b", nargs="?", help="Event B JSON file ('-' for stdin)")
    parser.add_argument(
        "--example",
        action="store_true",
        help="Compare the bundled sample login events instead of files",
    )
    parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default="text",
        help="Report format (default: text)",
    )
    parser.add_argument("--alias-config", help="YAML file with field alias rules")
    parser.add_argument(
        "--no-default-aliases",
        action="store_true",
        help="Disable the built-in user_id/userId alias when no alias file is given",
    )
    parser.add_argument("--output", help="Write the report to this file instead of stdout")
    parser.add_argument("--log-level", help="Log level (default: EVENT_CONSISTENCY_LOG_LEVEL or WARNING)")
    return parser


def _read_event_text(source: str, stdin: TextIO) -> str:
    if source == STDIN_MARKER:
        return stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin

    if args.example:
        if args.event_a or args.event_b:
            parser.error("--example cannot be combined with event files")
    elif not (args.event_a and args.event_b):
        parser.error("two event files are required (or use --example)")
    elif args.event_a == STDIN_MARKER and args.event_b == STDIN_MARKER:
        parser.error("stdin can supply only one of the two events")

    if args.log_level:
        set_log_level(args.log_level)

    try:
        settings = Settings(
            alias_config_path=args.alias_config,
            log_level=args.log_level,
            use_default_aliases=not args.no_default_aliases,
        )
    except ConfigurationError as e:
        logger.error("Configuration error", operation="cli", error=str(e))
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    set_log_level(settings.log_level)

    if args.example:
        text_a, text_b = load_example_pair()
        name_a, name_b = "example A", "example B"
    else:
        name_a, name_b = args.event_a, args.event_b
        try:
            text_a = _read_event_text(args.event_a, stdin)
            text_b = _read_event_text(args.event_b, stdin)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read event file", operation="cli", error=str(e))
            print(f"Cannot read event file: {e}", file=sys.stderr)
            return 1

    checker = ConsistencyChecker(settings)
    try:
        result, event_a, event_b = checker.check_texts(text_a, text_b)
    except MalformedEventError as e:
        print(format_parse_errors(e.errors), file=sys.stderr)
        return 1

    reporter = ResultReporter(event_a_name=name_a, event_b_name=name_b)
    if args.output:
        try:
            path = reporter.write_report(Path(args.output), result, args.format, event_a, event_b)
        except OSError as e:
            logger.error("Failed to write report", operation="cli", error=str(e))
            print(f"Cannot write report: {e}", file=sys.stderr)
            return 1
        print(f"Report written to {path}")
    else:
        print(reporter.render(result, args.format, event_a, event_b))

    return 0


if __name__ == "__main__":
    sys.exit(main())
