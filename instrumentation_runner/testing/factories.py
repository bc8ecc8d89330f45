"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory

from instrumentation_runner.models.result import SuiteResult


class SuiteResultFactory(DataclassFactory[SuiteResult]):
    """Factory for SuiteResult."""

    __model__ = SuiteResult

    attempts = 1
    duration = 0.0
