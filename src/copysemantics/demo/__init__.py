"""Runnable shallow vs deep copy demonstration."""

from copysemantics.demo.scenario import (
    ScenarioResult,
    build_roster,
    format_result,
    main,
    run_scenario,
)

__all__ = [
    "ScenarioResult",
    "build_roster",
    "run_scenario",
    "format_result",
    "main",
]
