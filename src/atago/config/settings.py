"""Configuration settings using Pydantic Settings.

Usage:
    from atago.config import UnitSettings

    # Load from environment variables (ATAGO_*)
    settings = UnitSettings()

    # Or override with explicit values
    settings = UnitSettings(warn_on_trait_collision=True)
    unit = Unit("player-1", "Hero", "player", settings=settings)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class UnitSettings(BaseSettings):  # type: ignore[misc]
    """Behavior switches for Unit.

    Attributes:
        warn_on_trait_collision: Emit a UserWarning when add_trait overwrites a
            property that holds a non-boolean value.
        validate_property_keys: Check that every initial property is stored
            under its own name.

    Environment Variables:
        ATAGO_WARN_ON_TRAIT_COLLISION
        ATAGO_VALIDATE_PROPERTY_KEYS
    """

    model_config = SettingsConfigDict(
        env_prefix="ATAGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warn_on_trait_collision: bool = False
    validate_property_keys: bool = True
