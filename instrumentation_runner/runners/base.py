"""Abstract base for running a single instrumentation test class."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ProcessLaunchError(Exception):
    """Raised when the per-test process cannot be started."""


@dataclass(frozen=True, kw_only=True)
class ProcessRunner(ABC):
    """Runs one attempt of one test class as an external process.

    Output of the process is not captured: it goes straight to the
    driver's own stdout and stderr.
    """

    @abstractmethod
    async def run_test(self, test_class: str) -> int:
        """Run a test class once and wait for the process to exit.

        Args:
            test_class: Fully qualified test class name

        Returns:
            Exit status of the process (0 means the test class passed)

        Raises:
            ProcessLaunchError: If the process could not be started

        """
