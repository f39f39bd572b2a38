"""Models for normalized performance scenario results."""

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from perf_test_runner.models.base import Model

ScenarioStatus = Literal["SUCCESS", "FAILURE"]


class ScenarioResult(Model):
    """Outcome of one executed performance scenario.

    Serialized with camelCase field names, which is what the reporting
    service ingests.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    scenario_name: str = Field(..., description="Scenario (test case) name")
    scenario_class: str = Field(..., description="Class declaring the scenario")
    test_project: str = Field(..., description="Project fixture the scenario ran on")
    build_id: str = Field(..., description="CI build identifier")
    web_url: str = Field(..., description="Link to the CI build")
    agent_name: str | None = Field(
        default=None, description="Build agent the scenario ran on"
    )
    status: ScenarioStatus = Field(..., description="SUCCESS or FAILURE")
    test_failure: str = Field(
        default="", description="Newline-joined failure messages"
    )
