"""Atago: units with composable, modifier-driven properties and traits.

Usage:
    from atago import Modifier, Unit

    player = Unit("player-1", "Hero", "player")
    player.set_property("attack", 20)
    player.set_property("level", 1)

    player.add_property_modifier("attack", Modifier.transform("iron-sword", lambda v: v + 5, 5))
    player.add_property_modifier(
        "attack",
        Modifier.transform("level-bonus", lambda v: v + player.get_property_value("level") * 2, 10),
    )
    player.update(1 / 60)
    player.get_property_value("attack")  # 27

    # Permanent changes go through the base value so update keeps them
    player.set_base_property("level", 5)
    player.update(1 / 60)
    player.get_property_value("attack")  # 35
"""

__version__ = "0.1.0"

# Configuration
from atago.config import UnitSettings

# Core primitives
from atago.core import (
    Constant,
    Modifier,
    Position,
    PropertyMap,
    PropertyScalar,
    PropertyValue,
    Transform,
    UnitPosition,
    apply_modifiers,
    is_position,
    is_unit_position,
    sort_modifiers,
)

# Traits
from atago.traits import (
    CharacterTrait,
    are_traits_compatible,
    do_traits_conflict,
    get_trait_influence,
    trait_influence_modifier,
)

# Units and properties
from atago.unit import (
    Property,
    PropertyContainer,
    PropertyError,
    PropertyNotFoundError,
    ReadonlyPropertyError,
    TraitHolder,
    Unit,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "PropertyScalar",
    "PropertyMap",
    "PropertyValue",
    "Position",
    "UnitPosition",
    "is_position",
    "is_unit_position",
    "Modifier",
    "Constant",
    "Transform",
    "apply_modifiers",
    "sort_modifiers",
    # Units
    "Unit",
    "Property",
    "PropertyContainer",
    "TraitHolder",
    "PropertyError",
    "PropertyNotFoundError",
    "ReadonlyPropertyError",
    # Traits
    "CharacterTrait",
    "are_traits_compatible",
    "do_traits_conflict",
    "get_trait_influence",
    "trait_influence_modifier",
    # Config
    "UnitSettings",
]
