"""Configuration module using Pydantic Settings.

Usage:
    from copysemantics.config import ScenarioSettings

    settings = ScenarioSettings(new_name="Roscoe")
"""

from copysemantics.config.settings import ScenarioSettings

__all__ = [
    "ScenarioSettings",
]
