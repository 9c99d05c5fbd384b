"""Configuration module using Pydantic Settings.

Usage:
    from atago.config import UnitSettings

    settings = UnitSettings(warn_on_trait_collision=True)
"""

from atago.config.settings import UnitSettings

__all__ = [
    "UnitSettings",
]
