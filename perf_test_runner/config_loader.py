"""Load performance test execution configs from YAML files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from perf_test_runner.models.config import ExecutionConfig


def load_execution_config(path: Path) -> ExecutionConfig:
    """Load and validate an execution config file.

    Args:
        path: Path to the YAML config file

    Returns:
        The validated execution config

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, not valid YAML, or fails validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {path}")

    if not isinstance(data, dict):
        raise ValueError(f"Invalid execution config schema in {path}: not a mapping")

    try:
        return ExecutionConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid execution config schema in {path}: {e}") from e
