"""Models for test class execution results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

Outcome = Literal["success", "failure"]


@dataclass(frozen=True, kw_only=True)
class SuiteResult:
    """Final outcome of one test class after retries.

    Produced once per test class, either at the first successful attempt or
    once every allowed attempt has failed.
    """

    test_class: str
    status: Outcome
    attempts: int
    duration: float


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Results table for a whole run, keyed by test class in execution order."""

    results: Mapping[str, SuiteResult] = field(default_factory=dict)

    @property
    def passing_suites(self) -> int:
        return sum(1 for r in self.results.values() if r.status == "success")

    @property
    def failing_suites(self) -> int:
        return sum(1 for r in self.results.values() if r.status == "failure")

    @property
    def total(self) -> int:
        return len(self.results)
