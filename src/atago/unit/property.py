"""Property: one named attribute with base value, current value and modifiers.

Usage:
    prop = Property("attack", 20)
    prop.modifiers.append(Modifier.transform("sword", lambda v: v + 5))
    prop.calculate_value()  # 25, prop.value still 20
    prop.recompute()        # prop.value == 25
"""

from __future__ import annotations

from atago.core.modifier import Modifier, apply_modifiers


class Property[T]:
    """Named attribute whose displayed value is derived from a base value.

    `base_value` is the permanent anchor every recompute starts from. `value`
    is what callers observe; it can be overwritten directly (damage, debuffs)
    and stays that way until the next recompute.

    Args:
        name: Property name, fixed for the lifetime of the property.
        value: Initial base and current value.
        readonly: If True, Unit refuses every mutation of this property.
    """

    __slots__ = ("_name", "base_value", "value", "modifiers", "readonly")

    def __init__(self, name: str, value: T, readonly: bool = False) -> None:
        self._name = name
        self.base_value: T = value
        self.value: T = value
        self.modifiers: list[Modifier] = []
        self.readonly = readonly

    @property
    def name(self) -> str:
        return self._name

    def calculate_value(self) -> T:
        """Fold the modifier stack over the base value.

        Pure query: neither `value` nor `base_value` is touched.

        Returns:
            Modifier-applied value.
        """
        return apply_modifiers(self.base_value, self.modifiers)

    def recompute(self) -> None:
        """Set `value` to `calculate_value()`."""
        self.value = self.calculate_value()

    def find_modifier(self, source: str) -> Modifier | None:
        """Get the modifier registered under `source`, if any."""
        for modifier in self.modifiers:
            if modifier.source == source:
                return modifier
        return None

    def put_modifier(self, modifier: Modifier) -> None:
        """Add modifier, replacing in place any modifier with the same source."""
        for i, existing in enumerate(self.modifiers):
            if existing.source == modifier.source:
                self.modifiers[i] = modifier
                return
        self.modifiers.append(modifier)

    def discard_modifier(self, source: str) -> bool:
        """Remove the modifier with `source`. Returns True if one existed."""
        remaining = [m for m in self.modifiers if m.source != source]
        removed = len(remaining) != len(self.modifiers)
        self.modifiers = remaining
        return removed

    def __repr__(self) -> str:
        flags = ", readonly" if self.readonly else ""
        return (
            f"Property({self._name!r}, value={self.value!r}, "
            f"base_value={self.base_value!r}, modifiers={len(self.modifiers)}{flags})"
        )
