"""CLI entry point for running instrumentation tests one by one with retries."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from instrumentation_runner.config import (
    DEFAULT_PACKAGE,
    DEFAULT_PATH,
    DEFAULT_SCRIPT,
    RunnerConfig,
)
from instrumentation_runner.discovery import discover_test_classes, select_shard
from instrumentation_runner.models.result import RunSummary
from instrumentation_runner.orchestrator import TestOrchestrator
from instrumentation_runner.reporting import format_output, print_results
from instrumentation_runner.retry import RetryExecutor
from instrumentation_runner.runners.script import ScriptRunner


async def run(config: RunnerConfig, console: Console | None = None) -> int:
    """Run the discovered test classes and return the exit code.

    The exit code is 0 once every class has run, whatever the outcomes.
    Failures are only visible in the printed report.
    """
    log = logging.getLogger("instrumentation_runner")
    if console is None:
        console = Console(force_terminal=True, color_system="standard")

    test_classes = discover_test_classes(
        config.path, config.package, config.filter_regex, config.extension
    )
    test_classes = select_shard(test_classes, config.offset, config.count)
    if config.offset is not None and config.count is not None:
        log.info(
            "Selected shard %d (size %d): %d test class(es)",
            config.offset,
            config.count,
            len(test_classes),
        )

    executor = RetryExecutor(
        runner=ScriptRunner.from_config(config), max_attempts=config.retries
    )
    orchestrator = TestOrchestrator(executor=executor)
    summary = await orchestrator.run_tests(test_classes)

    print_results(summary, console)

    if config.report_file is not None:
        write_report(summary, config.report_file)

    if summary.failing_suites:
        log.warning(
            "%d test class(es) failed; exiting with 0", summary.failing_suites
        )
    return 0


def write_report(summary: RunSummary, report_file: Path) -> None:
    """Write the JSON summary, logging instead of raising on I/O errors."""
    log = logging.getLogger("instrumentation_runner")
    try:
        report_file.write_text(json.dumps(format_output(summary), indent=2))
    except OSError as e:
        log.error("Cannot write JSON report to %s: %s", report_file, e)
        return
    log.info("Wrote JSON report to %s", report_file)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Run instrumentation test classes one by one with retries"
    )
    parser.add_argument(
        "--filter",
        default=".*",
        help="Case-insensitive regex restricting which test classes run",
    )
    parser.add_argument(
        "--package",
        default=DEFAULT_PACKAGE,
        help="Package of the test classes, passed to the runner script",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=DEFAULT_PATH,
        help="Directory containing the test source files",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=2,
        help="Maximum number of attempts per test class",
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=None,
        help="Index of the shard to run (requires --count)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of test classes per shard (requires --offset)",
    )
    parser.add_argument(
        "--script",
        type=Path,
        default=DEFAULT_SCRIPT,
        help="Script invoked as '<script> <package> <test class>' per attempt",
    )
    parser.add_argument(
        "--extension",
        default=".java",
        help="File extension of test source files",
    )
    parser.add_argument(
        "--report-file",
        type=Path,
        default=None,
        help="Write a JSON summary of the results to this file",
    )
    return parser


def main() -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    try:
        config = RunnerConfig(
            filter_pattern=args.filter,
            package=args.package,
            path=args.path,
            retries=args.retries,
            offset=args.offset,
            count=args.count,
            script=args.script,
            extension=args.extension,
            report_file=args.report_file,
        )
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(run(config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
