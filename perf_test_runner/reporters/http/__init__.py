"""HTTP results reporter module."""

from perf_test_runner.reporters.http.config import HttpReporterConfig
from perf_test_runner.reporters.http.manifest import http_reporter_manifest
from perf_test_runner.reporters.http.reporter import HttpReporter

__all__ = ["HttpReporter", "HttpReporterConfig", "http_reporter_manifest"]
