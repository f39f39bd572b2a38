"""Orchestrates one performance test execution from selection to reporting."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from perf_test_runner.arguments import assemble_arguments, mask_properties
from perf_test_runner.engines.base import (
    EngineError,
    EngineRequest,
    TestEngine,
    TestsFailedError,
)
from perf_test_runner.extraction import (
    AgentNameProvider,
    env_agent_name,
    load_results,
    write_results_json,
)
from perf_test_runner.models.config import ExecutionConfig
from perf_test_runner.models.filter import TestFilter
from perf_test_runner.models.result import ScenarioResult
from perf_test_runner.reporters.base import (
    NO_OP_REPORTER,
    ExecutionReport,
    PerformanceReporter,
    is_active,
)
from perf_test_runner.selection import resolve_selection

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ExecutionOutcome:
    """Result of an execution that was not aborted."""

    config: ExecutionConfig
    test_filter: TestFilter
    # Database parameter values are masked.
    arguments: Sequence[str]
    results: Sequence[ScenarioResult] = field(default_factory=tuple)
    tests_failed: bool = False


@dataclass(frozen=True, kw_only=True)
class PerformanceTestOrchestrator:
    """Runs the performance tests on an engine and reports their results.

    Failing tests are only tolerated while a reporter is active, so the
    failures reach the reporting service. Without one they propagate.
    """

    engine: TestEngine
    reporter: PerformanceReporter = NO_OP_REPORTER
    agent_name_provider: AgentNameProvider = env_agent_name

    def prepare(
        self, config: ExecutionConfig, test_filter: TestFilter
    ) -> tuple[ExecutionConfig, TestFilter]:
        """Move method filters to scenarios unless scenarios were given."""
        include_patterns, scenarios = resolve_selection(
            test_filter.include_patterns, config.scenarios
        )
        return (
            config.with_scenarios(scenarios),
            test_filter.replace_include_patterns(include_patterns),
        )

    async def execute(
        self,
        config: ExecutionConfig,
        test_filter: TestFilter,
        results_dir: Path,
    ) -> ExecutionOutcome:
        """Run the selected scenarios and collect their results.

        Args:
            config: Execution configuration
            test_filter: Include patterns given on the command line
            results_dir: Directory the engine writes its XML reports to

        Returns:
            The outcome, with the extracted results

        Raises:
            TestsFailedError: If tests failed and no reporter is active
            EngineError: If the engine could not run the tests
            ResultParseError: If a report can't be parsed

        """
        config, test_filter = self.prepare(config, test_filter)
        arguments = assemble_arguments(config)
        masked = frozenset(config.database_parameters)
        request = EngineRequest(
            include_patterns=test_filter.include_patterns,
            jvm_arguments=arguments,
            results_dir=results_dir,
            masked_properties=masked,
        )

        tests_failed = False
        results: Sequence[ScenarioResult] = ()
        try:
            await self.engine.execute(request)
        except TestsFailedError as e:
            if not is_active(self.reporter):
                raise
            log.warning("%s", e)
            tests_failed = True
        except EngineError as e:
            if is_active(self.reporter):
                # Extraction below may fail on partial reports and replace it.
                log.error("Test engine failed: %s", e)
            raise
        finally:
            if is_active(self.reporter):
                results = self._collect_results(config, results_dir)
                await self.reporter.report(
                    ExecutionReport(
                        config=config, results=results, tests_failed=tests_failed
                    )
                )

        if not is_active(self.reporter):
            results = self._collect_results(config, results_dir)

        return ExecutionOutcome(
            config=config,
            test_filter=test_filter,
            arguments=mask_properties(arguments, masked),
            results=results,
            tests_failed=tests_failed,
        )

    def _collect_results(
        self, config: ExecutionConfig, results_dir: Path
    ) -> Sequence[ScenarioResult]:
        results = load_results(
            results_dir,
            config.test_project_name or "",
            config.build_id or "",
            self.agent_name_provider,
        )
        if config.results_json is not None:
            write_results_json(config.results_json, results)
        return results
