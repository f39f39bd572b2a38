"""Fixtures for integration tests."""

import sys
import textwrap
from pathlib import Path
from typing import Protocol

import pytest


class LauncherFn(Protocol):
    """Protocol for fake launcher creation function."""

    def __call__(self, body: str) -> list[str]:
        """Write a launcher script and return the command running it."""


@pytest.fixture
def fake_launcher(tmp_path: Path) -> LauncherFn:
    """Return a function creating executable scripts standing in for a launcher.

    The script sees its arguments as ``argv`` and the reports directory as
    ``results_dir`` (passed with ``--results-dir``).
    """

    def _create(body: str) -> list[str]:
        script = tmp_path / "launcher"
        script.write_text(
            f"#!{sys.executable}\n"
            + textwrap.dedent(
                """
                import json
                import sys
                from pathlib import Path

                argv = sys.argv[1:]
                results_dir = Path(argv[argv.index("--results-dir") + 1])
                """
            )
            + textwrap.dedent(body)
        )
        script.chmod(0o755)
        return [str(script), "--results-dir", "{results_dir}"]

    return _create
