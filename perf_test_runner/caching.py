"""Decide whether a performance test execution may be cached."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from perf_test_runner.models.config import ExecutionConfig

NON_CACHEABLE_VERSIONS = frozenset({"last", "nightly", "flakiness-detection-commit"})

CACHE_REASON = (
    "baselines don't contain version 'flakiness-detection-commit', "
    "'last' or 'nightly'"
)


def is_cacheable(baselines: str | None) -> bool:
    """Check that no baseline names a floating, non-reproducible version.

    Args:
        baselines: Comma-separated baseline versions, e.g. ``"8.5, nightly"``

    Returns:
        False if any trimmed token is one of ``NON_CACHEABLE_VERSIONS``

    """
    return not any(
        token.strip() in NON_CACHEABLE_VERSIONS
        for token in (baselines or "").split(",")
    )


@dataclass(frozen=True, kw_only=True)
class CacheContract:
    """Inputs, outputs and the caching predicate of one execution.

    Build systems consult ``cacheable`` both before storing the outputs and
    before reusing stored ones, and skip the execution as up to date only
    when the same predicate holds.
    """

    cacheable: bool
    declared_inputs: Mapping[str, str] = field(default_factory=dict)
    input_files: Sequence[Path] = field(default_factory=tuple)
    output_paths: Sequence[Path] = field(default_factory=tuple)
    reason: str = CACHE_REASON

    @property
    def up_to_date(self) -> bool:
        """Whether a previous execution may be treated as up to date."""
        return self.cacheable

    @classmethod
    def from_config(cls, config: ExecutionConfig) -> "CacheContract":
        """Build the contract for an execution configuration."""
        candidates = {
            "scenarios": config.scenarios,
            "warmups": config.warmups,
            "runs": config.runs,
            "checks": config.checks,
            "channel": config.channel,
            "profiler": config.profiler,
            "databaseUrl": config.database_url,
            "testProjectName": config.test_project_name,
        }
        outputs = [
            path
            for path in (
                config.debug_artifacts_directory,
                config.report_dir,
                config.results_json,
            )
            if path is not None
        ]
        return cls(
            cacheable=is_cacheable(config.baselines),
            declared_inputs={k: v for k, v in candidates.items() if v is not None},
            input_files=tuple(config.test_project_files),
            output_paths=tuple(outputs),
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the contract as JSON-serializable data."""
        return {
            "cacheable": self.cacheable,
            "up_to_date": self.up_to_date,
            "reason": self.reason,
            "inputs": dict(self.declared_inputs),
            "input_files": [str(path) for path in self.input_files],
            "outputs": [str(path) for path in self.output_paths],
        }
