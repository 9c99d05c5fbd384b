"""Trait vocabulary and static lookup tables."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class CharacterTrait(StrEnum):
    """Known character traits. Any other string is accepted as a custom trait."""

    DEPRESSIVE = "depressive"
    JEALOUS = "jealous"
    HONEST = "honest"
    BRAVE = "brave"
    COWARDLY = "cowardly"
    GENEROUS = "generous"
    GREEDY = "greedy"
    LOYAL = "loyal"
    DECEITFUL = "deceitful"
    CALM = "calm"
    ANGRY = "angry"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"
    SHY = "shy"
    OUTGOING = "outgoing"
    CURIOUS = "curious"
    LAZY = "lazy"
    DILIGENT = "diligent"
    PATIENT = "patient"
    IMPATIENT = "impatient"


CONFLICTING_TRAITS: tuple[tuple[str, str], ...] = (
    (CharacterTrait.HONEST, CharacterTrait.DECEITFUL),
    (CharacterTrait.BRAVE, CharacterTrait.COWARDLY),
    (CharacterTrait.GENEROUS, CharacterTrait.GREEDY),
    (CharacterTrait.OPTIMISTIC, CharacterTrait.PESSIMISTIC),
    (CharacterTrait.CALM, CharacterTrait.ANGRY),
    (CharacterTrait.OUTGOING, CharacterTrait.SHY),
    (CharacterTrait.DILIGENT, CharacterTrait.LAZY),
)
"""Pairs of mutually opposed traits. Order within a pair is not significant."""

TRAIT_INFLUENCE: MappingProxyType[str, MappingProxyType[str, float]] = MappingProxyType(
    {
        CharacterTrait.BRAVE: MappingProxyType({"attack": 1.1, "defense": 1.05}),
        CharacterTrait.COWARDLY: MappingProxyType({"attack": 0.9, "defense": 0.8}),
        CharacterTrait.HONEST: MappingProxyType({"trust": 1.2}),
        CharacterTrait.DECEITFUL: MappingProxyType({"trust": 0.6}),
        CharacterTrait.GENEROUS: MappingProxyType({"resource": 1.1}),
        CharacterTrait.GREEDY: MappingProxyType({"resource": 0.9}),
        CharacterTrait.LOYAL: MappingProxyType({"loyalty": 1.5}),
    }
)
"""Multipliers a trait applies to other attributes, keyed by trait name."""
