"""Fixtures for integration tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

# Records "<package> <class>" per invocation. Classes ending in "Flaky" pass
# from their second attempt on, classes ending in "Broken" always exit 3.
RUNNER_SCRIPT = """#!/bin/sh
log="$(dirname "$0")/calls.log"
echo "$1 $2" >> "$log"
case "$2" in
  *Flaky)
    if [ "$(grep -cxF "$1 $2" "$log")" -ge 2 ]; then
      exit 0
    fi
    exit 1
    ;;
  *Broken)
    echo "instrumentation failed for $2" >&2
    exit 3
    ;;
esac
echo "OK (1 test)"
exit 0
"""


@pytest.fixture
def runner_script(tmp_path: Path) -> Path:
    """Create an executable stand-in for the adb shell script."""
    script_dir = tmp_path / "scripts"
    script_dir.mkdir()
    script = script_dir / "run-tests.sh"
    script.write_text(RUNNER_SCRIPT)
    script.chmod(0o755)
    return script


@pytest.fixture
def calls_log(runner_script: Path) -> Path:
    """Path of the invocation log written by the runner script."""
    return runner_script.parent / "calls.log"


@pytest.fixture
def create_tests(tmp_path: Path) -> Callable[..., Path]:
    """Return a function creating a flat directory of test sources."""

    def _create(*class_names: str) -> Path:
        test_dir = tmp_path / "java"
        test_dir.mkdir(exist_ok=True)
        for name in class_names:
            (test_dir / f"{name}.java").write_text(f"public class {name} {{}}\n")
        return test_dir

    return _create
