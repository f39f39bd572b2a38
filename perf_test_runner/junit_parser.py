"""Parse JUnit-style XML reports into the internal test suite structure."""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from perf_test_runner.models.junit import Failure, TestCase, TestSuiteDocument


class ResultParseError(Exception):
    """Raised when a test report can't be parsed."""


def parse_test_suite(source: Path | BinaryIO) -> TestSuiteDocument:
    """Parse one report document.

    Accepts a ``<testsuite>`` root, or a ``<testsuites>`` root whose suites
    are flattened in document order.

    Raises:
        ResultParseError: If the document is not well-formed or not a report

    """
    name = source if isinstance(source, Path) else getattr(source, "name", "<stream>")
    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise ResultParseError(f"Malformed test report {name}: {e}") from e

    if root.tag == "testsuite":
        suites = [root]
    elif root.tag == "testsuites":
        suites = root.findall("testsuite")
    else:
        raise ResultParseError(
            f"Unexpected root element <{root.tag}> in test report {name}"
        )

    return TestSuiteDocument(
        name=root.get("name"),
        test_cases=tuple(
            _parse_test_case(element)
            for suite in suites
            for element in suite.iter("testcase")
        ),
    )


def _parse_test_case(element: ET.Element) -> TestCase:
    return TestCase(
        name=element.get("name", ""),
        class_name=element.get("classname", ""),
        skipped=element.find("skipped") is not None,
        failures=tuple(_parse_failure(f) for f in element.findall("failure")),
        errors=tuple(_parse_failure(e) for e in element.findall("error")),
    )


def _parse_failure(element: ET.Element) -> Failure:
    return Failure(
        message=element.get("message"),
        type=element.get("type"),
        text=element.text or None,
    )
