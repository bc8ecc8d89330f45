"""Bounded retry of a single test class."""

import logging
import time
from dataclasses import dataclass

from instrumentation_runner.models.result import SuiteResult
from instrumentation_runner.runners.base import ProcessLaunchError, ProcessRunner

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class RetryExecutor:
    """Runs a test class up to ``max_attempts`` times, stopping at the first pass.

    Non-zero exits and launch errors are both treated as a failed attempt.
    Attempts are retried immediately and never raise out of ``run``.
    """

    runner: ProcessRunner
    max_attempts: int

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )

    async def run(self, test_class: str) -> SuiteResult:
        """Run a test class with retries and return its final outcome."""
        start = time.monotonic()

        for attempt in range(1, self.max_attempts + 1):
            log.info(
                "Running %s (attempt %d/%d)", test_class, attempt, self.max_attempts
            )
            if await self._attempt(test_class):
                return SuiteResult(
                    test_class=test_class,
                    status="success",
                    attempts=attempt,
                    duration=time.monotonic() - start,
                )

        log.warning("%s failed after %d attempt(s)", test_class, self.max_attempts)
        return SuiteResult(
            test_class=test_class,
            status="failure",
            attempts=self.max_attempts,
            duration=time.monotonic() - start,
        )

    async def _attempt(self, test_class: str) -> bool:
        try:
            code = await self.runner.run_test(test_class)
        except ProcessLaunchError as e:
            log.warning("Attempt for %s could not start: %s", test_class, e)
            return False

        if code != 0:
            log.warning("Process exited with code: %d (%s)", code, test_class)
            return False
        return True
