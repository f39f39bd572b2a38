"""Model for the test selection filter handed to the execution engine."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class TestFilter:
    """Command line include patterns selecting which tests to run."""

    __test__ = False

    include_patterns: Sequence[str] = field(default_factory=tuple)

    def replace_include_patterns(self, patterns: Iterable[str]) -> "TestFilter":
        """Return a filter with the include patterns replaced."""
        return TestFilter(include_patterns=tuple(patterns))
