"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from atago import Unit, UnitSettings


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return UnitSettings(_env_file=None, warn_on_trait_collision=False, validate_property_keys=True)


@pytest.fixture
def unit(settings):
    """Fresh Unit with no properties."""
    return Unit("unit-1", "Test Unit", "test", settings=settings)


@pytest.fixture
def player(settings):
    """Unit with a typical stat block."""
    hero = Unit("player-1", "Hero", "player", settings=settings)
    hero.set_property("health", 100)
    hero.set_property("attack", 20)
    hero.set_property("defense", 10)
    hero.set_property("level", 1)
    return hero
