#!/usr/bin/env python3
"""CLI interface for prose_lint."""

import argparse
import asyncio
from pathlib import Path

from common.env import env
from common.logger import error, get_logger, setup_logging, success

from .checks import CHECKS
from .linter import ProseLinter
from .pipeline import FileProcessingError, lint_paths
from .reporters import SuggestionReporter

logger = get_logger(__name__)


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def cmd_lint(args):
    """Lint files matching the given glob patterns.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if a file could not be processed)
    """
    base_dir = Path(args.base_dir)
    if not base_dir.is_dir():
        error(f"Base directory '{base_dir}' does not exist")
        return 1

    linter = ProseLinter(
        enabled=args.enable,
        disabled=args.disable,
        whitelist=args.whitelist,
    )
    reporter = SuggestionReporter(output_format=args.format)

    try:
        summary = asyncio.run(
            lint_paths(
                args.patterns,
                base_dir,
                linter,
                reporter.report,
                max_concurrency=args.max_concurrency,
            )
        )
    except FileProcessingError as e:
        error(f"Failed to lint {e.path}: {e.cause}")
        return 1

    if summary.suggestions == 0:
        success(f"No suggestions in {summary.files} file(s)")
    else:
        logger.info(
            f"[bold]{summary.suggestions}[/bold] suggestion(s) in [bold]{summary.files}[/bold] file(s)"
        )
    return 0


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prose-lint",
        description="Lint prose in text and markdown files with write-good style checks",
    )
    parser.add_argument("patterns", nargs="+", help="Glob patterns of files to lint")
    parser.add_argument(
        "--base-dir",
        type=str,
        default=str(env.base_dir()),
        help="Directory glob patterns are resolved against (default: PROSE_LINT_BASE_DIR or .)",
    )
    parser.add_argument(
        "--format",
        choices=SuggestionReporter.FORMATS,
        default=env.output_format(),
        help="Output format",
    )
    parser.add_argument(
        "--enable",
        action="append",
        choices=list(CHECKS),
        default=[],
        metavar="CHECK",
        help="Turn on a check that is off by default (repeatable)",
    )
    parser.add_argument(
        "--disable",
        action="append",
        choices=list(CHECKS),
        default=[],
        metavar="CHECK",
        help="Turn off a check (repeatable)",
    )
    parser.add_argument(
        "--whitelist",
        action="append",
        default=[],
        metavar="TEXT",
        help="Never flag this text (repeatable)",
    )
    parser.add_argument(
        "--max-concurrency",
        type=_positive_int,
        default=env.max_concurrency(),
        help="Maximum number of files processed at once",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log messages to this file",
    )
    parser.set_defaults(func=cmd_lint)
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level=env.log_level(), log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
