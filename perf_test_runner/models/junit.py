"""Internal representation of JUnit-style XML test suite reports.

These types decouple result extraction from whichever XML parser produced
them. Bump ``SCHEMA_VERSION`` when the shape changes.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

SCHEMA_VERSION = 1


@dataclass(frozen=True, kw_only=True)
class Failure:
    """A recorded ``<failure>`` or ``<error>`` entry of a test case."""

    message: str | None = None
    type: str | None = None
    text: str | None = None

    @property
    def value(self) -> str:
        """Failure text as written, or the message attribute if it is blank."""
        if self.text and not self.text.isspace():
            return self.text
        return self.message or ""


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """A single ``<testcase>`` element."""

    __test__ = False

    name: str
    class_name: str
    skipped: bool = False
    failures: Sequence[Failure] = field(default_factory=tuple)
    errors: Sequence[Failure] = field(default_factory=tuple)

    @property
    def failed(self) -> bool:
        """Whether any failure or error was recorded."""
        return bool(self.failures or self.errors)


@dataclass(frozen=True, kw_only=True)
class TestSuiteDocument:
    """One parsed report document with its test cases in document order."""

    __test__ = False

    name: str | None = None
    test_cases: Sequence[TestCase] = field(default_factory=tuple)
    version: int = SCHEMA_VERSION
