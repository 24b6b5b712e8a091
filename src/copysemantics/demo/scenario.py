"""Shallow vs deep copy demonstration.

Builds a roster holding one mutable Dog followed by plain strings, copies it,
renames the dog through the copy, and reports what the original sees.

Usage:
    result = run_scenario(CopyMode.SHALLOW)
    result.original_first_name  # "Roscoe": the dog is shared

    result = run_scenario(CopyMode.DEEP)
    result.original_first_name  # "Buster": the dog was duplicated
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from copysemantics.config import ScenarioSettings
from copysemantics.core import CopyMode, Dog, copy_with, find_shared_references

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScenarioResult:
    """Outcome of copying the roster and renaming the copy's dog.

    Attributes:
        mode: Copy mode used.
        original_first_name: Name read through the original roster afterwards.
        copied_first_name: Name read through the copy afterwards.
        aliased: Whether both rosters hold the same Dog instance.
        shared_paths: Paths of mutable objects reachable from both rosters.
    """

    mode: CopyMode
    original_first_name: str
    copied_first_name: str
    aliased: bool
    shared_paths: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "mode": self.mode.name.lower(),
            "original_first_name": self.original_first_name,
            "copied_first_name": self.copied_first_name,
            "aliased": self.aliased,
            "shared_paths": list(self.shared_paths),
        }


def build_roster(settings: ScenarioSettings | None = None) -> list[Any]:
    """Build ``[Dog(first_name), *other_names]``."""
    settings = settings or ScenarioSettings()
    return [Dog(settings.first_name), *settings.other_names]


def run_scenario(mode: CopyMode, settings: ScenarioSettings | None = None) -> ScenarioResult:
    """Copy the roster with `mode`, rename the copy's dog, and inspect both.

    Args:
        mode: Copy mode to apply to the roster.
        settings: Names to use. Defaults are loaded from the environment.

    Returns:
        What the original and the copy report after the rename.
    """
    settings = settings or ScenarioSettings()
    original = build_roster(settings)
    copied = copy_with(original, mode)

    copied[0].set_name(settings.new_name)

    shared = find_shared_references(original, copied)
    logger.debug("Mode %s shared paths: %s", mode.name, [ref.dotted for ref in shared])
    return ScenarioResult(
        mode=mode,
        original_first_name=original[0].get_name(),
        copied_first_name=copied[0].get_name(),
        aliased=original[0] is copied[0],
        shared_paths=[ref.dotted for ref in shared],
    )


def format_result(result: ScenarioResult) -> list[str]:
    """Render a scenario result as the lines the demonstration prints."""
    label = result.mode.name.capitalize()
    shared = ", ".join(result.shared_paths) if result.shared_paths else "nothing"
    return [
        f"{label} copy:",
        f"  original[0].name = {result.original_first_name}",
        f"  copy[0].name     = {result.copied_first_name}",
        f"  same Dog object: {result.aliased}",
        f"  shared mutable objects: {shared}",
    ]


def main(settings: ScenarioSettings | None = None) -> None:
    """Run the shallow then the deep scenario and print the results."""
    settings = settings or ScenarioSettings()
    for mode in (CopyMode.SHALLOW, CopyMode.DEEP):
        for line in format_result(run_scenario(mode, settings)):
            print(line)
