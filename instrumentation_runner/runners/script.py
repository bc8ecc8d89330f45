"""Runner spawning the instrumentation script for each attempt."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from instrumentation_runner.config import RunnerConfig
from instrumentation_runner.runners.base import ProcessLaunchError, ProcessRunner

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ScriptRunner(ProcessRunner):
    """Invokes ``<script> <package> <test_class>`` with inherited stdio."""

    script: Path
    package: str

    @classmethod
    def from_config(cls, config: RunnerConfig) -> "ScriptRunner":
        """Create runner from the run configuration."""
        return cls(script=config.script, package=config.package)

    async def run_test(self, test_class: str) -> int:
        """Spawn the script for one test class and return its exit status."""
        log.debug("Spawning %s %s %s", self.script, self.package, test_class)
        try:
            process = await asyncio.create_subprocess_exec(
                str(self.script),
                self.package,
                test_class,
            )
        except (OSError, ValueError) as e:
            raise ProcessLaunchError(
                f"Cannot start {self.script} for {test_class}: {e}"
            ) from e

        return await process.wait()
