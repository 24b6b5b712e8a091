"""copysemantics: shallow vs deep copying of nested mutable objects.

Usage:
    from copysemantics import CopyMode, Dog, copy_with, find_shared_references

    roster = [Dog("Buster"), "Ginger", "Mimi", "Ella"]

    view = copy_with(roster, CopyMode.SHALLOW)
    view[0].set_name("Roscoe")
    roster[0].get_name()  # "Roscoe": both lists hold the same Dog

    clone = copy_with(roster, CopyMode.DEEP)
    clone[0].set_name("Buster")
    roster[0].get_name()  # still "Roscoe"
"""

__version__ = "0.1.0"

# Core primitives
from copysemantics.core import (
    Copy,
    CopyError,
    CopyMode,
    Dog,
    SharedReference,
    View,
    copy_with,
    deep_copy,
    find_shared_references,
    is_independent,
    shallow_copy,
)

# Demonstration
from copysemantics.demo import (
    ScenarioResult,
    build_roster,
    format_result,
    run_scenario,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "View",
    "Dog",
    "CopyMode",
    "CopyError",
    "shallow_copy",
    "deep_copy",
    "copy_with",
    "SharedReference",
    "find_shared_references",
    "is_independent",
    # Demo
    "ScenarioResult",
    "build_roster",
    "run_scenario",
    "format_result",
]
