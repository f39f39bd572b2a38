"""Abstract base class for performance result reporters."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from perf_test_runner.models.config import ExecutionConfig
from perf_test_runner.models.result import ScenarioResult


@dataclass(frozen=True, kw_only=True)
class ExecutionReport:
    """Everything a reporter gets to see about a finished execution."""

    config: ExecutionConfig
    results: Sequence[ScenarioResult] = field(default_factory=tuple)
    tests_failed: bool = False


class PerformanceReporter(ABC):
    """Abstract base for services receiving performance test results."""

    @abstractmethod
    async def report(self, report: ExecutionReport) -> None:
        """Publish the results of an execution.

        Args:
            report: Extracted results together with the execution config

        """


class NoOpReporter(PerformanceReporter):
    """Reporter used when reporting is disabled."""

    async def report(self, report: ExecutionReport) -> None:
        """Do nothing."""


NO_OP_REPORTER = NoOpReporter()


def is_active(reporter: PerformanceReporter) -> bool:
    """Check whether a reporter actually publishes results."""
    return not isinstance(reporter, NoOpReporter)
