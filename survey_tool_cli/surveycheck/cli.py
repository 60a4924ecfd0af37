"""Command line entry point: ``survey-tool-cli check FILE`` / ``setup-check``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from rich.console import Console
from rich.text import Text

from surveycheck import __version__
from surveycheck.checker import ValidationReport, check_config
from surveycheck.config import Settings, load_settings
from surveycheck.errors import SurveyCheckError
from surveycheck.setup import check_host

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="survey-tool-cli",
        description="Supports in handling Survey Tool configuration files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Increase output")

    sub = parser.add_subparsers(dest="command", required=True)
    check = sub.add_parser(
        "check", help="Check a survey tool configuration file (yaml) for correctness",
    )
    check.add_argument("file", help="The file to check")
    sub.add_parser("setup-check", help="Check capability of local system to run survey tool")
    return parser


def render_report(report: ValidationReport, console: Console, verbose: bool = False) -> None:
    """Print a report: a banner, then failures (and successes when verbose)."""
    if report.all_passed:
        console.print(Text("### All OK ###", style="green bold"))
        if verbose:
            for message in report.successes:
                console.print(f" ✅ {message}", markup=False)
        return

    console.print(Text(f"### {len(report.failures)} errors ###", style="yellow bold"))
    if verbose:
        console.print(Text("Successful:", style="green underline bold"))
        for message in report.successes:
            console.print(f" ✅ {message}", markup=False)
        console.print(Text("Failed:", style="red underline bold"))
    for message in report.failures:
        console.print(f" ❌ {message}", markup=False)
    if verbose and report.output:
        console.print(report.output, markup=False)


def _print_error(console: Console, error: SurveyCheckError) -> None:
    console.print(Text("Error: ", style="red").append(str(error)))


def run_check(
    action: Callable[[], ValidationReport], console: Console, verbose: bool = False,
) -> int:
    """Run one check and render its outcome. Returns the process exit code."""
    try:
        report = action()
    except SurveyCheckError as e:
        _print_error(console, e)
        return EXIT_ERROR

    render_report(report, console, verbose)
    return EXIT_OK if report.all_passed else EXIT_FAILED


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    try:
        settings: Settings = load_settings()
    except SurveyCheckError as e:
        _print_error(console, e)
        return EXIT_ERROR

    log_level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug("Running %s with %s", args.command, settings.model_dump())

    if args.command == "check":
        return run_check(lambda: check_config(args.file, settings), console, args.verbose)
    return run_check(lambda: check_host(settings), console, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
