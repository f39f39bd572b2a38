"""Reporter manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from pydantic import BaseModel

from perf_test_runner.reporters.base import PerformanceReporter


@dataclass(frozen=True, kw_only=True)
class ReporterManifest[ConfigT: BaseModel]:
    """Manifest describing a reporter plugin.

    Holds the configuration class and the factory creating the reporter, so
    reporters are only imported once selected by their key.
    """

    config_cls: type[ConfigT]
    reporter_factory: Callable[
        [ConfigT], AbstractAsyncContextManager[PerformanceReporter]
    ]
