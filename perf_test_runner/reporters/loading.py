"""Loading of reporters registered under the reporters entry point group."""

import logging
from importlib.metadata import entry_points
from typing import Any

from perf_test_runner.reporters.manifest import ReporterManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "perf_test_runner.reporters"


class ReporterNotFoundError(Exception):
    """Raised when no usable reporter is registered under a key."""


def load_reporter_manifest(key: str) -> ReporterManifest[Any]:
    """Load a reporter manifest by key.

    Args:
        key: The reporter key as registered in pyproject.toml (e.g., "http")

    Returns:
        The reporter manifest instance

    Raises:
        ReporterNotFoundError: If no reporter is registered under the key, or
            its entry point doesn't point to a reporter manifest

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name != key:
            continue
        manifest = entry.load()
        if not isinstance(manifest, ReporterManifest):
            raise ReporterNotFoundError(
                f"Entry point '{key}' ({entry.value}) is not a reporter manifest"
            )
        log.debug("Loaded reporter '%s' from %s", key, entry.value)
        return manifest

    available = sorted(e.name for e in entries)
    raise ReporterNotFoundError(
        f"Reporter '{key}' not found. Available reporters: {available}"
    )
