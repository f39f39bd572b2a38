"""Abstract base class for performance test execution engines."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path


class EngineError(Exception):
    """Raised when the execution engine fails to run the tests."""


class TestsFailedError(EngineError):
    """Raised when the tests ran but some of them failed."""

    __test__ = False


@dataclass(frozen=True, kw_only=True)
class EngineRequest:
    """What the engine should run and where it should put its reports.

    Values of ``masked_properties`` are passed to the engine but never logged.
    """

    include_patterns: Sequence[str] = field(default_factory=tuple)
    jvm_arguments: Sequence[str] = field(default_factory=tuple)
    results_dir: Path
    masked_properties: frozenset[str] = frozenset()


@dataclass(frozen=True, kw_only=True)
class TestEngine(ABC):
    """Abstract base for engines executing performance test scenarios."""

    __test__ = False

    @abstractmethod
    async def execute(self, request: EngineRequest) -> None:
        """Run the selected tests and write JUnit XML reports.

        Args:
            request: Include patterns, JVM arguments and the results directory

        Raises:
            TestsFailedError: If the tests ran and at least one failed
            EngineError: If the tests could not be run

        """
