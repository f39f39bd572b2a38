"""CLI entry point for running performance tests."""

import argparse
import asyncio
import json
import logging
import shlex
import sys
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from perf_test_runner.arguments import assemble_arguments
from perf_test_runner.caching import CacheContract
from perf_test_runner.config_loader import load_execution_config
from perf_test_runner.engines.base import EngineError
from perf_test_runner.engines.command import CommandTestEngine
from perf_test_runner.extraction import generate_results_json
from perf_test_runner.models.config import ExecutionConfig
from perf_test_runner.models.filter import TestFilter
from perf_test_runner.models.result import ScenarioResult
from perf_test_runner.orchestrator import ExecutionOutcome, PerformanceTestOrchestrator
from perf_test_runner.reporters.base import NO_OP_REPORTER, PerformanceReporter
from perf_test_runner.reporters.loading import load_reporter_manifest
from perf_test_runner.selection import resolve_selection, translate_include_patterns

DEFAULT_DEBUG_ARTIFACTS_DIRECTORY = Path("build") / "performance-test"

STATUS_SYMBOLS = {
    "SUCCESS": "✅",
    "FAILURE": "❌",
}

CONFIG_OVERRIDES = {
    "scenarios": "scenarios",
    "baselines": "baselines",
    "warmups": "warmups",
    "runs": "runs",
    "checks": "checks",
    "channel": "channel",
    "profiler": "profiler",
    "test_project": "test_project_name",
    "debug_artifacts_dir": "debug_artifacts_directory",
    "report_dir": "report_dir",
    "results_json": "results_json",
    "build_id": "build_id",
    "branch_name": "branch_name",
}


def log_results_summary(
    log: logging.Logger, results: Sequence[ScenarioResult]
) -> None:
    """Log a formatted summary of scenario results with build URLs."""
    log.info("=" * 80)
    log.info("Performance Test Results Summary:")
    log.info("=" * 80)

    for result in results:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        log.info(
            "%s %s.%s: %s",
            symbol,
            result.scenario_class,
            result.scenario_name,
            result.status,
        )
        if result.test_failure:
            log.info("  Failure: %s", result.test_failure)

    if results:
        log.info("Build URL: %s", results[0].web_url)


def parse_database_parameters(values: Sequence[str]) -> Mapping[str, str]:
    """Parse repeated ``KEY=VALUE`` database parameters, keeping their order."""
    parameters: dict[str, str] = {}
    for value in values:
        key, sep, param = value.partition("=")
        if not sep or not key.strip():
            raise ValueError(
                f"Invalid database parameter '{value}', expected KEY=VALUE"
            )
        parameters[key.strip()] = param
    return parameters


def build_config(args: argparse.Namespace) -> ExecutionConfig:
    """Build the execution config from an optional file and CLI overrides."""
    data: dict[str, Any] = {}
    if args.config is not None:
        data = load_execution_config(args.config).model_dump()

    for option, field_name in CONFIG_OVERRIDES.items():
        if (value := getattr(args, option)) is not None:
            data[field_name] = value

    if args.test_project_file:
        data["test_project_files"] = args.test_project_file
    data.setdefault("debug_artifacts_directory", DEFAULT_DEBUG_ARTIFACTS_DIRECTORY)

    config = ExecutionConfig.model_validate(data)
    if args.db_param:
        config = config.with_database_parameters(
            parse_database_parameters(args.db_param)
        )
    return config


@asynccontextmanager
async def open_reporter(
    reporter_key: str | None, reporter_config_json: str
) -> AsyncGenerator[PerformanceReporter, None]:
    """Open the selected reporter, or the no-op reporter if none is selected."""
    if reporter_key is None:
        yield NO_OP_REPORTER
        return

    manifest = load_reporter_manifest(reporter_key)
    config = manifest.config_cls(**json.loads(reporter_config_json))
    async with manifest.reporter_factory(config) as reporter:
        yield reporter


async def run(
    config: ExecutionConfig,
    test_filter: TestFilter,
    results_dir: Path,
    engine_command: Sequence[str],
    tests_failed_exit_code: int = 1,
    reporter_key: str | None = None,
    reporter_config_json: str = "{}",
) -> int:
    """Run performance tests and return exit code."""
    log = logging.getLogger("perf_test_runner")

    engine = CommandTestEngine(
        command=engine_command, tests_failed_exit_code=tests_failed_exit_code
    )

    log.info("Reporter: %s", reporter_key or "none")
    async with open_reporter(reporter_key, reporter_config_json) as reporter:
        orchestrator = PerformanceTestOrchestrator(engine=engine, reporter=reporter)
        outcome = await orchestrator.execute(config, test_filter, results_dir)

    log_results_summary(log, outcome.results)
    print(json.dumps(format_output(outcome), indent=2))
    return 0


def format_output(outcome: ExecutionOutcome) -> dict[str, Any]:
    """Format an execution outcome for JSON output."""
    results = [
        result.model_dump(mode="json", by_alias=True) for result in outcome.results
    ]
    return {
        "total": len(results),
        "passed": sum(1 for r in results if r["status"] == "SUCCESS"),
        "failed": sum(1 for r in results if r["status"] == "FAILURE"),
        "tests_failed": outcome.tests_failed,
        "scenarios": outcome.config.scenarios,
        "include_patterns": list(outcome.test_filter.include_patterns),
        "arguments": list(outcome.arguments),
        "results": results,
    }


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the execution config options to a subcommand parser."""
    parser.add_argument(
        "--config", type=Path, help="YAML file with the execution configuration"
    )
    parser.add_argument(
        "--scenarios",
        help="A semicolon-separated list of performance test scenario ids to run.",
    )
    parser.add_argument(
        "--baselines",
        help=(
            "A comma or semicolon separated list of Gradle versions to be used "
            "as baselines for comparing."
        ),
    )
    parser.add_argument("--warmups", help="Number of warmups before measurements")
    parser.add_argument("--runs", help="Number of iterations of measurements")
    parser.add_argument(
        "--checks",
        choices=["none", "speed", "all"],
        help="Tells which regressions to check. One of [none, speed, all]",
    )
    parser.add_argument(
        "--channel",
        help=(
            "Channel to use when running the performance test. "
            "By default, 'commits'."
        ),
    )
    parser.add_argument(
        "--profiler",
        help=(
            "Allows configuring a profiler to use. The same options as for "
            "Gradle profilers --profiler command line option are available"
        ),
    )
    parser.add_argument("--test-project", help="Name of the test project fixture")
    parser.add_argument(
        "--test-project-file",
        type=Path,
        action="append",
        default=[],
        help="Generated test project file (repeatable)",
    )
    parser.add_argument(
        "--debug-artifacts-dir",
        type=Path,
        help=(
            "Debug artifacts directory "
            f"(default: {DEFAULT_DEBUG_ARTIFACTS_DIRECTORY})"
        ),
    )
    parser.add_argument("--report-dir", type=Path, help="Report output directory")
    parser.add_argument("--results-json", type=Path, help="Results JSON output file")
    parser.add_argument("--build-id", help="CI build identifier")
    parser.add_argument("--branch-name", help="Branch under test")
    parser.add_argument(
        "--db-param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Results database connection parameter (repeatable)",
    )


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the test filter option to a subcommand parser."""
    parser.add_argument(
        "--tests",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Include pattern, e.g. com.example.MyPerformanceTest.myScenario",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Run performance test scenarios and normalize their results"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run performance tests")
    add_config_arguments(run_parser)
    add_filter_arguments(run_parser)
    run_parser.add_argument(
        "--results-dir",
        type=Path,
        required=True,
        help="Directory the engine writes JUnit XML reports to",
    )
    run_parser.add_argument(
        "--engine-command",
        required=True,
        help="Test launcher command, e.g. 'java -jar launcher.jar'",
    )
    run_parser.add_argument(
        "--tests-failed-exit-code",
        type=int,
        default=1,
        help="Exit code the launcher uses to signal failing tests",
    )
    run_parser.add_argument(
        "--reporter", help="Reporter key (e.g., http); reporting is off without one"
    )
    run_parser.add_argument(
        "--reporter-config", default="{}", help="JSON configuration for the reporter"
    )

    translate_parser = subparsers.add_parser(
        "translate", help="Show how include patterns map to scenarios"
    )
    translate_parser.add_argument("patterns", nargs="*", help="Include patterns")

    arguments_parser = subparsers.add_parser(
        "arguments", help="Print the system properties passed to the engine"
    )
    add_config_arguments(arguments_parser)
    add_filter_arguments(arguments_parser)

    cacheable_parser = subparsers.add_parser(
        "cacheable", help="Print the cache contract; exit 1 if not cacheable"
    )
    add_config_arguments(cacheable_parser)

    extract_parser = subparsers.add_parser(
        "extract", help="Convert JUnit XML reports to a results JSON file"
    )
    extract_parser.add_argument("--results-dir", type=Path, required=True)
    extract_parser.add_argument("--results-json", type=Path, required=True)
    extract_parser.add_argument("--test-project", required=True)
    extract_parser.add_argument("--build-id", required=True)

    return parser


def dispatch(args: argparse.Namespace) -> int:
    """Execute the selected subcommand and return its exit code."""
    if args.command == "translate":
        selection = translate_include_patterns(args.patterns)
        output = {
            "class_filters": list(selection.ordered_class_filters),
            "scenarios": selection.scenarios,
        }
        print(json.dumps(output, indent=2))
        return 0

    if args.command == "extract":
        results = generate_results_json(
            args.results_dir, args.results_json, args.test_project, args.build_id
        )
        log_results_summary(logging.getLogger("perf_test_runner"), results)
        return 0

    config = build_config(args)

    if args.command == "cacheable":
        contract = CacheContract.from_config(config)
        print(json.dumps(contract.to_dict(), indent=2))
        return 0 if contract.cacheable else 1

    if args.command == "arguments":
        _, scenarios = resolve_selection(args.tests, config.scenarios)
        config = config.with_scenarios(scenarios)
        for argument in assemble_arguments(config):
            print(argument)
        return 0

    return asyncio.run(
        run(
            config=config,
            test_filter=TestFilter(include_patterns=tuple(args.tests)),
            results_dir=args.results_dir,
            engine_command=shlex.split(args.engine_command),
            tests_failed_exit_code=args.tests_failed_exit_code,
            reporter_key=args.reporter,
            reporter_config_json=args.reporter_config,
        )
    )


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        exit_code = dispatch(args)
    except EngineError as e:
        logging.getLogger("perf_test_runner").error("%s", e)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
