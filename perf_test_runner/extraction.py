"""Extract normalized scenario results from JUnit-style XML reports."""

import json
import locale
import logging
import os
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from perf_test_runner.junit_parser import parse_test_suite
from perf_test_runner.models.junit import TestCase, TestSuiteDocument
from perf_test_runner.models.result import ScenarioResult

log = logging.getLogger(__name__)

TC_URL = "https://builds.gradle.org/viewLog.html?buildId="
AGENT_NAME_VARIABLE = "BUILD_AGENT_NAME"

type AgentNameProvider = Callable[[], str | None]


def env_agent_name() -> str | None:
    """Read the build agent name from the environment."""
    return os.environ.get(AGENT_NAME_VARIABLE) or None


def collect_failures(test_case: TestCase) -> str:
    """Join the recorded failure messages of a test case."""
    return "\n".join(failure.value for failure in test_case.failures)


def extract_results(
    documents: Iterable[TestSuiteDocument],
    test_project: str,
    build_id: str,
    agent_name_provider: AgentNameProvider = env_agent_name,
) -> Sequence[ScenarioResult]:
    """Build one result per executed test case across all documents.

    Skipped test cases produce no result. Results keep document order,
    then test case order within each document.
    """
    agent_name = agent_name_provider()
    return [
        ScenarioResult(
            scenario_name=test_case.name,
            scenario_class=test_case.class_name,
            test_project=test_project,
            build_id=build_id,
            web_url=TC_URL + build_id,
            agent_name=agent_name,
            status="FAILURE" if test_case.failed else "SUCCESS",
            test_failure=collect_failures(test_case),
        )
        for document in documents
        for test_case in document.test_cases
        if not test_case.skipped
    ]


def find_result_files(results_dir: Path) -> Sequence[Path]:
    """List the XML reports in a results directory, sorted by name."""
    if not results_dir.is_dir():
        log.info("Results directory %s does not exist", results_dir)
        return []
    return sorted(
        path
        for path in results_dir.iterdir()
        if path.is_file() and path.suffix == ".xml"
    )


def serialize_results(results: Sequence[ScenarioResult]) -> str:
    """Serialize results to a JSON array with camelCase field names."""
    return json.dumps(
        [result.model_dump(mode="json", by_alias=True) for result in results]
    )


def load_results(
    results_dir: Path,
    test_project: str,
    build_id: str,
    agent_name_provider: AgentNameProvider = env_agent_name,
) -> Sequence[ScenarioResult]:
    """Parse all reports in a directory, one after the other, into results.

    A malformed report aborts the whole extraction since partial results
    must not be reported.

    Raises:
        ResultParseError: If any report can't be parsed

    """
    files = find_result_files(results_dir)
    log.info("Extracting results from %d report(s) in %s", len(files), results_dir)

    documents = [parse_test_suite(path) for path in files]
    return extract_results(documents, test_project, build_id, agent_name_provider)


def write_results_json(results_json: Path, results: Sequence[ScenarioResult]) -> None:
    """Write results to a JSON file in the platform default encoding."""
    results_json.parent.mkdir(parents=True, exist_ok=True)
    results_json.write_text(
        serialize_results(results), encoding=locale.getpreferredencoding(False)
    )
    log.info("Wrote %d result(s) to %s", len(results), results_json)


def generate_results_json(
    results_dir: Path,
    results_json: Path,
    test_project: str,
    build_id: str,
    agent_name_provider: AgentNameProvider = env_agent_name,
) -> Sequence[ScenarioResult]:
    """Extract results from all reports in a directory and write them as JSON.

    Raises:
        ResultParseError: If any report can't be parsed

    """
    results = load_results(results_dir, test_project, build_id, agent_name_provider)
    write_results_json(results_json, results)
    return results
