"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from perf_test_runner.models.junit import Failure, TestCase
from perf_test_runner.models.result import ScenarioResult


class ScenarioResultFactory(ModelFactory[ScenarioResult]):
    """Factory for ScenarioResult."""


class FailureFactory(DataclassFactory[Failure]):
    """Factory for Failure."""

    __model__ = Failure

    type = None


class TestCaseFactory(DataclassFactory[TestCase]):
    """Factory for TestCase."""

    __test__ = False
    __model__ = TestCase

    skipped = False
    failures = ()
    errors = ()
