"""Shallow vs deep copy walkthrough.

Demonstrates:
- Copying a list that holds a mutable Dog plus plain strings
- Renaming the dog through a shallow copy (the original sees it)
- Renaming the dog through a deep copy (the original does not)
- Finding which mutable objects two lists still share
"""

import logging

from copysemantics import CopyMode, Dog, copy_with, find_shared_references
from copysemantics.config import ScenarioSettings
from copysemantics.demo import main as run_demo


def nested_walkthrough() -> None:
    """Aliasing one level further down: a dog inside a dict inside a list."""
    kennel = [{"resident": Dog("Buster"), "tags": ["good", "loud"]}, "open"]

    view = copy_with(kennel, CopyMode.SHALLOW)
    shared = [ref.dotted for ref in find_shared_references(kennel, view)]
    print(f"Shallow kennel copy shares: {shared}")

    clone = copy_with(kennel, CopyMode.DEEP)
    clone[0]["tags"].append("sleepy")
    print(f"Original tags after deep copy edit: {kennel[0]['tags']}")
    print("Deep kennel copy shares:", find_shared_references(kennel, clone) or "nothing")


def main() -> None:
    settings = ScenarioSettings()
    if settings.debug:
        logging.basicConfig(level=logging.DEBUG)

    run_demo(settings)
    print()
    nested_walkthrough()


if __name__ == "__main__":
    main()
