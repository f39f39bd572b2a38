"""Reporter publishing results to an HTTP ingestion service."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from perf_test_runner.reporters.base import ExecutionReport, PerformanceReporter
from perf_test_runner.reporters.http.config import HttpReporterConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpReporter(PerformanceReporter):
    """Posts extracted scenario results to the reporting service."""

    config: HttpReporterConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: HttpReporterConfig
    ) -> AsyncGenerator["HttpReporter", None]:
        """Create reporter with managed session lifecycle."""
        headers = {"Accept": "application/json"}
        if config.token is not None:
            headers["Authorization"] = f"Bearer {config.token.get_secret_value()}"
        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=config.timeout),
        ) as session:
            yield cls(config=config, session=session)

    def build_payload(self, report: ExecutionReport) -> dict[str, Any]:
        """Build the JSON document sent to the reporting service."""
        config = report.config
        return {
            "buildId": config.build_id,
            "branchName": config.branch_name,
            "channel": config.channel,
            "testProject": config.test_project_name,
            "testsFailed": report.tests_failed,
            "results": [
                result.model_dump(mode="json", by_alias=True)
                for result in report.results
            ],
        }

    async def report(self, report: ExecutionReport) -> None:
        """Post the results of an execution."""
        log.info(
            "Reporting %d result(s) for build %s to %s%s",
            len(report.results),
            report.config.build_id,
            self.config.api_base_url,
            self.config.path,
        )
        async with self.session.post(
            self.config.path, json=self.build_payload(report)
        ) as response:
            if response.status not in {200, 201, 202, 204}:
                text = await response.text()
                raise RuntimeError(
                    f"Failed to report results: {response.status} {text}"
                )
