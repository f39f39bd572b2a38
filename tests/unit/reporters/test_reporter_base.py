"""Tests for reporter base types."""

from unittest.mock import Mock

from perf_test_runner.reporters.base import (
    NO_OP_REPORTER,
    NoOpReporter,
    PerformanceReporter,
    is_active,
)


def test_no_op_reporter_is_inactive() -> None:
    """The no-op reporter does not count as active reporting."""
    assert is_active(NO_OP_REPORTER) is False
    assert is_active(NoOpReporter()) is False


def test_other_reporters_are_active() -> None:
    """Any real reporter is active."""
    assert is_active(Mock(spec=PerformanceReporter)) is True
