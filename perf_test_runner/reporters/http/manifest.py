"""HTTP reporter manifest."""

from perf_test_runner.reporters.http.config import HttpReporterConfig
from perf_test_runner.reporters.http.reporter import HttpReporter
from perf_test_runner.reporters.manifest import ReporterManifest

http_reporter_manifest = ReporterManifest(
    config_cls=HttpReporterConfig,
    reporter_factory=HttpReporter.from_config,
)
