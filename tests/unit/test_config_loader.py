"""Tests for execution config loading."""

from pathlib import Path

import pytest

from perf_test_runner.config_loader import load_execution_config


class TestLoadExecutionConfig:
    """Tests for load_execution_config function."""

    __test__ = True  # Explicitly mark as test class despite "Test" prefix

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads and validates a full config file."""
        path = tmp_path / "perf.yaml"
        path.write_text(
            """
test_project_name: largeJavaMultiProject
baselines: "8.5,nightly"
warmups: "2"
runs: "10"
checks: speed
channel: commits
profiler: async
debug_artifacts_directory: build/performance
results_json: build/performance/results.json
database_parameters:
  org.gradle.performance.db.url: jdbc:h2:mem
  org.gradle.performance.db.username: perf
"""
        )

        config = load_execution_config(path)

        assert config.test_project_name == "largeJavaMultiProject"
        assert config.baselines == "8.5,nightly"
        assert config.checks == "speed"
        assert config.debug_artifacts_directory == Path("build/performance")
        assert config.database_url == "jdbc:h2:mem"
        assert list(config.database_parameters) == [
            "org.gradle.performance.db.url",
            "org.gradle.performance.db.username",
        ]
        assert config.scenarios is None

    def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        """Raises FileNotFoundError for a missing config file."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_execution_config(tmp_path / "missing.yaml")

    def test_raises_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ValueError for malformed YAML."""
        path = tmp_path / "perf.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_execution_config(path)

    def test_raises_for_empty_file(self, tmp_path: Path) -> None:
        """Raises ValueError for an empty config file."""
        path = tmp_path / "perf.yaml"
        path.write_text("")

        with pytest.raises(ValueError, match="Empty config file"):
            load_execution_config(path)

    def test_raises_for_non_mapping(self, tmp_path: Path) -> None:
        """Raises ValueError when the document is not a mapping."""
        path = tmp_path / "perf.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="Invalid execution config schema"):
            load_execution_config(path)

    def test_raises_for_invalid_schema(self, tmp_path: Path) -> None:
        """Raises ValueError for unknown regression check modes."""
        path = tmp_path / "perf.yaml"
        path.write_text("debug_artifacts_directory: out\nchecks: everything\n")

        with pytest.raises(ValueError, match="Invalid execution config schema"):
            load_execution_config(path)

    def test_raises_for_missing_required_fields(self, tmp_path: Path) -> None:
        """Raises ValueError when the debug artifacts directory is missing."""
        path = tmp_path / "perf.yaml"
        path.write_text("runs: '10'\n")

        with pytest.raises(ValueError, match="Invalid execution config schema"):
            load_execution_config(path)

    def test_raises_for_unknown_option(self, tmp_path: Path) -> None:
        """Raises ValueError for misspelled options instead of ignoring them."""
        path = tmp_path / "perf.yaml"
        path.write_text("debug_artifacts_directory: out\nwarmup: '2'\n")

        with pytest.raises(ValueError, match="Invalid execution config schema"):
            load_execution_config(path)
