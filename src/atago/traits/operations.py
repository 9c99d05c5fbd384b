"""Trait queries across units.

All functions are pure reads over TraitHolder; none mutates a unit.

Usage:
    are_traits_compatible(hero, sidekick, "brave")
    do_traits_conflict(hero, rival, "honest")
    get_trait_influence("brave")  # {"attack": 1.1, "defense": 1.05}
"""

from __future__ import annotations

from atago.core.modifier import Modifier
from atago.traits.models import CONFLICTING_TRAITS, TRAIT_INFLUENCE
from atago.unit.protocol import TraitHolder


def are_traits_compatible(unit1: TraitHolder, unit2: TraitHolder, trait: str) -> bool:
    """Check if both units share a trait.

    Returns:
        True if both units have `trait`.
    """
    return unit1.has_trait(trait) and unit2.has_trait(trait)


def do_traits_conflict(unit1: TraitHolder, unit2: TraitHolder, trait: str) -> bool:
    """Check if two units sharing `trait` hold opposite sides of a conflicting pair.

    Args:
        unit1: First unit.
        unit2: Second unit.
        trait: Trait both units must have for a conflict to matter.

    Returns:
        True if both have `trait` and, for some pair in CONFLICTING_TRAITS, one
        unit holds one side and the other unit holds the other side.
    """
    if not are_traits_compatible(unit1, unit2, trait):
        return False
    return any(
        (unit1.has_trait(a) and unit2.has_trait(b)) or (unit1.has_trait(b) and unit2.has_trait(a))
        for a, b in CONFLICTING_TRAITS
    )


def get_trait_influence(trait: str) -> dict[str, float]:
    """Look up attribute multipliers for a trait.

    Returns:
        Fresh dict of attribute -> multiplier, empty for unknown traits.
    """
    return dict(TRAIT_INFLUENCE.get(trait, {}))


def trait_influence_modifier(trait: str, attribute: str, priority: int = 0) -> Modifier | None:
    """Build a modifier applying a trait's multiplier to one attribute.

    Args:
        trait: Trait whose influence to apply.
        attribute: Attribute the modifier will be attached to.
        priority: Modifier priority.

    Returns:
        Modifier with source "trait:<trait>", or None if the trait has no
        influence on `attribute`.
    """
    multiplier = get_trait_influence(trait).get(attribute)
    if multiplier is None:
        return None
    return Modifier.transform(f"trait:{trait}", lambda v: v * multiplier, priority)
