"""Character traits: vocabulary, influence table, and cross-unit queries."""

from atago.traits.models import CONFLICTING_TRAITS, TRAIT_INFLUENCE, CharacterTrait
from atago.traits.operations import (
    are_traits_compatible,
    do_traits_conflict,
    get_trait_influence,
    trait_influence_modifier,
)

__all__ = [
    "CharacterTrait",
    "CONFLICTING_TRAITS",
    "TRAIT_INFLUENCE",
    "are_traits_compatible",
    "do_traits_conflict",
    "get_trait_influence",
    "trait_influence_modifier",
]
