"""Translate command line test filters into scenario selections."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

SCENARIO_SEPARATOR = ";"


@dataclass(frozen=True, kw_only=True)
class SelectionResult:
    """Class-only filters plus the scenario ids carved out of method filters."""

    class_filters: frozenset[str] = field(default_factory=frozenset)
    ordered_class_filters: Sequence[str] = field(default_factory=tuple)
    scenario_ids: Sequence[str] = field(default_factory=tuple)

    @property
    def scenarios(self) -> str:
        """Scenario ids joined the way the benchmark runner expects them."""
        return SCENARIO_SEPARATOR.join(self.scenario_ids)


def translate_include_patterns(patterns: Sequence[str]) -> SelectionResult:
    """Move method filters out of the include patterns and into scenarios.

    Single unrolled scenarios can't be selected by the test framework's own
    filtering, so the benchmark runner picks them from the scenario list
    instead. Class filters are still applied by the framework.

    Args:
        patterns: Command line include patterns, e.g. ``com.foo.BarTest.myScenario``

    Returns:
        Class-only filters and the selected scenario ids, in input order

    """
    class_filters: dict[str, None] = {}
    scenario_ids: list[str] = []

    for pattern in patterns:
        class_name, dot, member_name = pattern.rpartition(".")
        if not dot:
            class_filters[pattern] = None
        elif member_name[:1].islower():
            scenario_ids.append(member_name)
            class_filters[class_name] = None
        else:
            # Nested classes and the like, not a scenario selector
            class_filters[pattern] = None

    return SelectionResult(
        class_filters=frozenset(class_filters),
        ordered_class_filters=tuple(class_filters),
        scenario_ids=tuple(scenario_ids),
    )


def resolve_selection(
    include_patterns: Sequence[str], scenarios: str | None
) -> tuple[Sequence[str], str | None]:
    """Return the include patterns and scenarios to run with.

    An explicit scenario list wins and leaves the patterns untouched.
    """
    if scenarios is not None:
        return include_patterns, scenarios

    selection = translate_include_patterns(include_patterns)
    if selection.scenario_ids:
        log.info(
            "Moved %d method filter(s) to scenarios: %s",
            len(selection.scenario_ids),
            selection.scenarios,
        )
    return selection.ordered_class_filters, selection.scenarios
