"""Sequential orchestration of test classes on a single device."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from instrumentation_runner.models.result import RunSummary, SuiteResult
from instrumentation_runner.retry import RetryExecutor

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestOrchestrator:
    """Runs test classes one after another through the retry executor.

    Instrumentation tests share one device or emulator, so classes are never
    run concurrently.
    """

    __test__ = False

    executor: RetryExecutor

    async def run_tests(self, test_classes: Sequence[str]) -> RunSummary:
        """Run every test class in order and collect their outcomes.

        Args:
            test_classes: Fully qualified test class names, in execution order

        Returns:
            Summary with one result per distinct test class. A class listed
            twice keeps the result of its last run.

        """
        if not test_classes:
            log.info("No test classes to run")
            return RunSummary()

        log.info("Running %d test class(es) sequentially...", len(test_classes))
        results: dict[str, SuiteResult] = {}

        for test_class in test_classes:
            result = await self.executor.run(test_class)
            log.info(
                "Test completed: class=%s status=%s attempts=%d duration=%.1fs",
                result.test_class,
                result.status,
                result.attempts,
                result.duration,
            )
            results[test_class] = result

        log.info("Test execution completed")
        return RunSummary(results=results)
