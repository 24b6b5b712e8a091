"""Configuration settings using Pydantic Settings.

Provides the names used by the copy demonstration, with environment variable
support.

Usage:
    from copysemantics.config import ScenarioSettings

    # Load from environment variables (COPYSEMANTICS_*)
    settings = ScenarioSettings()

    # Or override with explicit values
    settings = ScenarioSettings(first_name="Rex", new_name="Max")
"""

from __future__ import annotations

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install copysemantics"
    ) from e


class ScenarioSettings(BaseSettings):  # type: ignore[misc]
    """Names used to build and mutate the demonstration roster.

    Attributes:
        first_name: Name of the dog at the head of the roster.
        new_name: Name assigned to the copy's dog.
        other_names: Plain string entries following the dog.
        debug: Enable debug logging in the example script.

    Environment Variables:
        COPYSEMANTICS_FIRST_NAME
        COPYSEMANTICS_NEW_NAME
        COPYSEMANTICS_OTHER_NAMES (JSON list, e.g. '["Ginger", "Mimi"]')
        COPYSEMANTICS_DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="COPYSEMANTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    first_name: str = Field(default="Buster", min_length=1)
    new_name: str = Field(default="Roscoe", min_length=1)
    other_names: list[str] = Field(default_factory=lambda: ["Ginger", "Mimi", "Ella"])
    debug: bool = False
