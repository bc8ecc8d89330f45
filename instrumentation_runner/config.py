"""Runner configuration resolved once at startup."""

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PACKAGE = "com.facebook.react.tests"
DEFAULT_PATH = Path("./ReactAndroid/src/androidTest/java/com/facebook/react/tests")
DEFAULT_SCRIPT = Path("./scripts/run-instrumentation-tests-via-adb-shell.sh")


class RunnerConfig(BaseModel):
    """Configuration for a single instrumentation test run."""

    model_config = ConfigDict(frozen=True)

    filter_pattern: str = Field(
        default=".*", description="Case-insensitive regex matched against test classes"
    )
    package: str = Field(default=DEFAULT_PACKAGE, min_length=1)
    path: Path = Field(default=DEFAULT_PATH, description="Directory with test files")
    retries: int = Field(default=2, ge=1, description="Maximum attempts per class")
    offset: int | None = Field(default=None, ge=0)
    count: int | None = Field(default=None, ge=0)
    script: Path = Field(default=DEFAULT_SCRIPT, description="Per-test runner script")
    extension: str = Field(default=".java", min_length=1)
    report_file: Path | None = Field(
        default=None, description="Optional path for a JSON summary"
    )

    @field_validator("filter_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid filter pattern: {e}") from e
        return value

    @property
    def filter_regex(self) -> re.Pattern[str]:
        """Compiled case-insensitive filter."""
        return re.compile(self.filter_pattern, re.IGNORECASE)
