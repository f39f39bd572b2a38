"""Builders for JUnit XML reports used in tests."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr


@dataclass(frozen=True, kw_only=True)
class CaseSpec:
    """Description of a ``<testcase>`` to render."""

    name: str
    class_name: str = "org.gradle.performance.ExamplePerformanceTest"
    skipped: bool = False
    failures: Sequence[str] = field(default_factory=tuple)
    errors: Sequence[str] = field(default_factory=tuple)


def render_test_suite(cases: Sequence[CaseSpec], name: str = "suite") -> str:
    """Render a ``<testsuite>`` document for the given cases."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f"<testsuite name={quoteattr(name)} tests={quoteattr(str(len(cases)))}>",
    ]
    for case in cases:
        lines.append(
            f"  <testcase name={quoteattr(case.name)} "
            f"classname={quoteattr(case.class_name)}>"
        )
        if case.skipped:
            lines.append("    <skipped/>")
        for failure in case.failures:
            lines.append(
                f"    <failure message={quoteattr(failure)}>{escape(failure)}</failure>"
            )
        for error in case.errors:
            lines.append(
                f"    <error message={quoteattr(error)}>{escape(error)}</error>"
            )
        lines.append("  </testcase>")
    lines.append("</testsuite>")
    return "\n".join(lines) + "\n"


def write_test_suite(
    directory: Path, file_name: str, cases: Sequence[CaseSpec]
) -> Path:
    """Write a rendered test suite into a directory and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name
    path.write_text(
        render_test_suite(cases, name=Path(file_name).stem), encoding="utf-8"
    )
    return path
