"""Execution engine running the performance tests as an external command."""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from perf_test_runner.arguments import mask_properties
from perf_test_runner.engines.base import (
    EngineError,
    EngineRequest,
    TestEngine,
    TestsFailedError,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CommandTestEngine(TestEngine):
    """Runs a test launcher command in a subprocess.

    The JVM arguments go right after the executable, so a command like
    ``java -jar launcher.jar`` receives them as system properties. Each
    include pattern is appended as ``--tests <pattern>``. A ``{results_dir}``
    placeholder in the command is replaced with the reports directory.
    """

    command: Sequence[str]
    cwd: Path | None = None
    env: Mapping[str, str] | None = field(default=None, repr=False)
    tests_failed_exit_code: int = 1

    def build_argv(self, request: EngineRequest) -> Sequence[str]:
        """Build the full command line for a request."""
        if not self.command:
            raise EngineError("No engine command configured")
        executable, *rest = (
            part.replace("{results_dir}", str(request.results_dir))
            for part in self.command
        )
        argv = [executable, *request.jvm_arguments, *rest]
        for pattern in request.include_patterns:
            argv.extend(["--tests", pattern])
        return argv

    async def execute(self, request: EngineRequest) -> None:
        """Run the command and translate its exit code."""
        argv = self.build_argv(request)
        request.results_dir.mkdir(parents=True, exist_ok=True)

        log.info(
            "Running performance tests: %s",
            " ".join(mask_properties(argv, request.masked_properties)),
        )
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=self.cwd,
                env=dict(self.env) if self.env is not None else None,
            )
        except OSError as e:
            raise EngineError(f"Failed to start {argv[0]}: {e}") from e

        returncode = await process.wait()
        if returncode == 0:
            log.info("Performance tests completed")
            return

        if returncode == self.tests_failed_exit_code:
            raise TestsFailedError(
                f"There were failing tests. See the results at: {request.results_dir}"
            )
        raise EngineError(f"Test engine exited with code {returncode}")
