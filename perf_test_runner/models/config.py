"""Models for the configuration of one performance test execution."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Literal

from pydantic import ConfigDict, Field

from perf_test_runner.models.base import Model

DATABASE_URL_PARAMETER = "org.gradle.performance.db.url"


class ExecutionConfig(Model):
    """Everything the execution engine needs to know about one run.

    Optional values left unset are omitted from the generated arguments.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    scenarios: str | None = Field(
        default=None,
        description="A semicolon-separated list of performance test scenario ids to run.",
    )
    test_project_name: str | None = Field(
        default=None, description="Name of the project fixture under test"
    )
    test_project_files: Sequence[Path] = Field(
        default_factory=list, description="Generated files of the test project"
    )
    baselines: str | None = Field(
        default=None,
        description=(
            "A comma or semicolon separated list of Gradle versions to be used "
            "as baselines for comparing."
        ),
    )
    warmups: str | None = Field(
        default=None, description="Number of warmups before measurements"
    )
    runs: str | None = Field(
        default=None, description="Number of iterations of measurements"
    )
    checks: Literal["none", "speed", "all"] | None = Field(
        default=None,
        description="Tells which regressions to check. One of [none, speed, all]",
    )
    channel: str | None = Field(
        default=None,
        description=(
            "Channel to use when running the performance test. "
            "By default, 'commits'."
        ),
    )
    profiler: str | None = Field(
        default=None,
        description="Profiler to attach, same values as the Gradle profiler accepts",
    )
    debug_artifacts_directory: Path = Field(
        ..., description="Directory receiving debug artifacts of the run"
    )
    report_dir: Path | None = Field(
        default=None, description="Directory receiving the rendered report"
    )
    results_json: Path | None = Field(
        default=None, description="Where the extracted results are written"
    )
    build_id: str | None = Field(default=None, description="CI build identifier")
    branch_name: str | None = Field(default=None, description="Branch under test")
    database_parameters: Mapping[str, str] = Field(
        default_factory=dict,
        description="Results database connection parameters, passed verbatim",
    )

    @property
    def database_url(self) -> str | None:
        """Results database URL, if one was configured."""
        return self.database_parameters.get(DATABASE_URL_PARAMETER)

    def with_scenarios(self, scenarios: str | None) -> "ExecutionConfig":
        """Return a copy with the scenario list replaced."""
        return self.model_copy(update={"scenarios": scenarios})

    def with_database_parameters(
        self, parameters: Mapping[str, str]
    ) -> "ExecutionConfig":
        """Return a copy with additional database parameters merged in."""
        merged = {**self.database_parameters, **parameters}
        return self.model_copy(update={"database_parameters": merged})
