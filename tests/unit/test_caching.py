"""Tests for the cacheability predicate and cache contract."""

from pathlib import Path

import pytest

from perf_test_runner.caching import CACHE_REASON, CacheContract, is_cacheable
from perf_test_runner.models.config import ExecutionConfig


@pytest.mark.parametrize(
    ("baselines", "expected"),
    [
        (None, True),
        ("", True),
        ("1.0,2.0", True),
        ("8.5", True),
        ("1.0, nightly", False),
        ("last", False),
        ("  flakiness-detection-commit  ", False),
        ("8.5,last,8.6", False),
        ("Nightly", True),
        ("nightly-build", True),
        ("1.0;nightly", True),
    ],
)
def test_is_cacheable(baselines: str | None, expected: bool) -> None:
    """Only exact special versions among comma-separated tokens disable caching."""
    assert is_cacheable(baselines) is expected


def test_contract_from_config() -> None:
    """Contract lists present inputs and declared outputs."""
    config = ExecutionConfig(
        scenarios="s1;s2",
        baselines="8.5",
        runs="10",
        test_project_name="largeJavaProject",
        test_project_files=[Path("build/largeJavaProject/settings.gradle")],
        debug_artifacts_directory=Path("/out"),
        results_json=Path("/out/results.json"),
        database_parameters={"org.gradle.performance.db.url": "jdbc:h2:mem"},
    )

    contract = CacheContract.from_config(config)

    assert contract.cacheable is True
    assert contract.up_to_date is True
    assert contract.declared_inputs == {
        "scenarios": "s1;s2",
        "runs": "10",
        "databaseUrl": "jdbc:h2:mem",
        "testProjectName": "largeJavaProject",
    }
    assert contract.input_files == (Path("build/largeJavaProject/settings.gradle"),)
    assert contract.output_paths == (Path("/out"), Path("/out/results.json"))


def test_contract_not_cacheable_with_special_baseline() -> None:
    """Store, reuse and up-to-date decisions all follow the same predicate."""
    config = ExecutionConfig(
        baselines="8.5, last", debug_artifacts_directory=Path("/out")
    )

    contract = CacheContract.from_config(config)

    assert contract.cacheable is False
    assert contract.up_to_date is False


def test_contract_to_dict() -> None:
    """Contract renders to plain JSON data."""
    config = ExecutionConfig(debug_artifacts_directory=Path("/out"))

    data = CacheContract.from_config(config).to_dict()

    assert data == {
        "cacheable": True,
        "up_to_date": True,
        "reason": CACHE_REASON,
        "inputs": {},
        "input_files": [],
        "outputs": ["/out"],
    }
