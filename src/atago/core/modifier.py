"""Modifier models and the modifier fold.

A modifier is a named, prioritized effect on a property. Effects are either a
Constant (replace the running value) or a Transform (map the running value).

Usage:
    sword = Modifier.transform("iron-sword", lambda v: v + 5, priority=5)
    cursed = Modifier.constant("curse", 1, priority=100)

    apply_modifiers(20, [sword])  # 25
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Constant:
    """Effect that discards the running value and substitutes `value`."""

    value: Any

    def apply(self, current: Any) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class Transform:
    """Effect that maps the running value through a pure unary function."""

    fn: Callable[[Any], Any]

    def apply(self, current: Any) -> Any:
        return self.fn(current)


type Effect = Constant | Transform


@dataclass(frozen=True, slots=True)
class Modifier:
    """Named effect applied to a property during recompute.

    Attributes:
        source: Unique identifier of what applied the modifier (item id, buff name).
            At most one modifier per source lives on a property.
        effect: Constant replacement or Transform function.
        priority: Lower priorities are applied first. Default 0.
    """

    source: str
    effect: Effect
    priority: int = 0

    @classmethod
    def constant(cls, source: str, value: Any, priority: int = 0) -> Modifier:
        """Create a modifier that overrides the value."""
        return cls(source=source, effect=Constant(value), priority=priority)

    @classmethod
    def transform(cls, source: str, fn: Callable[[Any], Any], priority: int = 0) -> Modifier:
        """Create a modifier that maps the value through `fn`."""
        return cls(source=source, effect=Transform(fn), priority=priority)


def sort_modifiers(modifiers: Iterable[Modifier]) -> list[Modifier]:
    """Order modifiers by ascending priority, keeping insertion order for ties.

    Args:
        modifiers: Modifiers in insertion order.

    Returns:
        New list in application order.
    """
    # sorted() is stable
    return sorted(modifiers, key=lambda m: m.priority)


def apply_modifiers[T](base: T, modifiers: Iterable[Modifier]) -> T:
    """Fold modifiers over a base value.

    Starts from `base` and applies each effect in `sort_modifiers` order.
    A Constant replaces the running value; a Transform receives it.

    Args:
        base: Starting value.
        modifiers: Modifier stack in insertion order.

    Returns:
        Final value. `base` itself when there are no modifiers.
    """
    result: Any = base
    for modifier in sort_modifiers(modifiers):
        result = modifier.effect.apply(result)
    return result
