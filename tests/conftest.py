"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from copysemantics import Dog
from copysemantics.config import ScenarioSettings


@pytest.fixture
def roster():
    """The roster from the walkthrough: one Dog followed by plain strings."""
    return [Dog("Buster"), "Ginger", "Mimi", "Ella"]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any COPYSEMANTICS_* variables inherited from the host."""
    import os

    for key in list(os.environ):
        if key.startswith("COPYSEMANTICS_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def settings(clean_env):
    """Default names, independent of the host environment and any .env file."""
    return ScenarioSettings(_env_file=None)
