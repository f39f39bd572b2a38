"""Assemble the system properties passed to the performance test JVM."""

from collections.abc import Collection, Sequence

from perf_test_runner.models.config import ExecutionConfig

PROPERTY_PREFIX = "org.gradle.performance"
MASKED_VALUE = "****"


def system_property(name: str, value: object) -> str:
    """Format a single ``-D`` system property argument."""
    return f"-D{name}={value}"


def assemble_arguments(config: ExecutionConfig) -> Sequence[str]:
    """Build the ordered ``-D`` arguments for an execution.

    Unset values are left out. The flame graph directory and the profiler
    are only passed when a profiler is configured. Database parameters come
    last, in the order they were added.
    """
    properties: list[tuple[str, object | None]] = [
        (f"{PROPERTY_PREFIX}.scenarios", config.scenarios),
        (f"{PROPERTY_PREFIX}.testProject", config.test_project_name),
        (f"{PROPERTY_PREFIX}.baselines", config.baselines),
        (f"{PROPERTY_PREFIX}.execution.warmups", config.warmups),
        (f"{PROPERTY_PREFIX}.execution.runs", config.runs),
        (f"{PROPERTY_PREFIX}.regression.checks", config.checks),
        (f"{PROPERTY_PREFIX}.execution.channel", config.channel),
        (
            f"{PROPERTY_PREFIX}.debugArtifactsDirectory",
            config.debug_artifacts_directory,
        ),
    ]

    if config.profiler is not None:
        flames = (config.debug_artifacts_directory / "flames").absolute()
        properties.append((f"{PROPERTY_PREFIX}.flameGraphTargetDir", flames))
        properties.append((f"{PROPERTY_PREFIX}.profiler", config.profiler))

    properties.extend(config.database_parameters.items())

    return [
        system_property(name, value)
        for name, value in properties
        if value is not None
    ]


def mask_properties(
    arguments: Sequence[str], names: Collection[str]
) -> Sequence[str]:
    """Replace the values of the named ``-D`` properties with a mask.

    Used wherever arguments are shown, so database credentials never reach
    logs or printed output.
    """
    masked = []
    for argument in arguments:
        name, sep, _ = argument.removeprefix("-D").partition("=")
        if argument.startswith("-D") and sep and name in names:
            masked.append(system_property(name, MASKED_VALUE))
        else:
            masked.append(argument)
    return masked
