"""Rendering of run summaries for operators and automation."""

from typing import Any

from rich.console import Console
from rich.text import Text

from instrumentation_runner.models.result import Outcome, RunSummary

STATUS_STYLES: dict[Outcome, str] = {
    "success": "green",
    "failure": "red",
}

STATUS_PADDING = 8


def print_results(summary: RunSummary, console: Console) -> None:
    """Print one colored line per test class followed by the totals."""
    console.print("\n\nTest Suite Results:\n")

    width = max((len(name) for name in summary.results), default=0)
    for name, result in summary.results.items():
        padding = " " * (width - len(name) + STATUS_PADDING)
        line = Text(f"{name}{padding}{result.status}")
        line.stylize(STATUS_STYLES[result.status])
        console.print(line, soft_wrap=True)

    console.print(
        f"\n{summary.passing_suites} passing, {summary.failing_suites} failing!",
        highlight=False,
    )


def format_output(summary: RunSummary) -> dict[str, Any]:
    """Format a run summary for JSON output."""
    return {
        "total": summary.total,
        "passed": summary.passing_suites,
        "failed": summary.failing_suites,
        "results": [
            {
                "test_class": result.test_class,
                "status": result.status,
                "attempts": result.attempts,
                "duration": result.duration,
            }
            for result in summary.results.values()
        ],
    }
