"""Process runners executing one attempt of a test class."""

from instrumentation_runner.runners.base import ProcessLaunchError, ProcessRunner
from instrumentation_runner.runners.script import ScriptRunner

__all__ = ["ProcessLaunchError", "ProcessRunner", "ScriptRunner"]
