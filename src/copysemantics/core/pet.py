"""Mutable record used as the nested element in copy demonstrations.

Usage:
    dog = Dog("Buster")
    dog.set_name("Roscoe")
    dog.get_name()  # "Roscoe"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Dog:
    """A dog with a single mutable name.

    Attributes:
        name: Current name of the dog.
    """

    name: str

    def get_name(self) -> str:
        """Return the dog's current name."""
        return self.name

    def set_name(self, name: str) -> None:
        """Rename the dog in place.

        Args:
            name: New name.

        Raises:
            TypeError: If the name is not a string.
            ValueError: If the name is empty or only whitespace.
        """
        if not isinstance(name, str):
            raise TypeError(f"Dog name must be a str, got {type(name).__name__}")
        if not name.strip():
            raise ValueError("Dog name must not be empty")
        self.name = name
