"""Unit: entity owning a set of named properties.

Usage:
    player = Unit("player-1", "Hero", "player")
    player.set_property("attack", 20)
    player.add_property_modifier("attack", Modifier.transform("sword", lambda v: v + 5, 5))
    player.update(1 / 60)
    player.get_property_value("attack")  # 25

    # Temporary vs permanent changes
    player.set_property("health", 70)         # damage: base stays
    player.set_base_property("strength", 15)  # training: base moves

    # Traits share the property namespace
    player.add_trait("brave")
    player.has_trait("brave")  # True
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator, Mapping
from typing import Any

from atago.config.settings import UnitSettings
from atago.core.modifier import Modifier
from atago.unit.errors import PropertyNotFoundError, ReadonlyPropertyError
from atago.unit.property import Property


class Unit:
    """Game entity with dynamically composed properties and traits.

    Owns its property mapping exclusively. Mutations only touch state; values
    are re-derived from base values and modifiers when `update` is called.

    Args:
        id: Unique identifier.
        name: Display name.
        unit_type: Free-form classification tag ("player", "npc", ...).
        properties: Initial properties keyed by name. The mapping is copied,
            the Property objects are not.
        settings: Behavior switches. Defaults to UnitSettings() from environment.
    """

    def __init__(
        self,
        id: str,
        name: str,
        unit_type: str = "unit",
        properties: Mapping[str, Property[Any]] | None = None,
        *,
        settings: UnitSettings | None = None,
    ):
        self._id = id
        self._name = name
        self._type = unit_type
        self._settings = settings if settings is not None else UnitSettings()
        self.properties: dict[str, Property[Any]] = dict(properties) if properties else {}
        if self._settings.validate_property_keys:
            for key, prop in self.properties.items():
                if key != prop.name:
                    raise ValueError(
                        f'Property "{prop.name}" stored under mismatched key "{key}"'
                    )

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> str:
        return self._type

    # --- Property queries ---

    def get_property(self, name: str) -> Property[Any] | None:
        """Get property by name.

        Returns:
            The property, or None if it doesn't exist.
        """
        return self.properties.get(name)

    def get_property_value(self, name: str, default: Any = None) -> Any:
        """Get the current value of a property.

        None doubles as a legal property value; pass `default` or use
        `require_property_value` when absence must be told apart.

        Args:
            name: Property name.
            default: Returned when the property doesn't exist.

        Returns:
            Current value, or `default` if the property doesn't exist.
        """
        prop = self.properties.get(name)
        return prop.value if prop is not None else default

    def require_property(self, name: str) -> Property[Any]:
        """Get property by name, treating absence as an error.

        Raises:
            PropertyNotFoundError: If the property doesn't exist.
        """
        prop = self.properties.get(name)
        if prop is None:
            raise PropertyNotFoundError(name)
        return prop

    def require_property_value(self, name: str) -> Any:
        """Get the current value of a property, treating absence as an error.

        Raises:
            PropertyNotFoundError: If the property doesn't exist.
        """
        return self.require_property(name).value

    # --- Property mutation ---

    def _writable(self, name: str) -> Property[Any] | None:
        prop = self.properties.get(name)
        if prop is not None and prop.readonly:
            raise ReadonlyPropertyError(name)
        return prop

    def set_property(self, name: str, value: Any) -> None:
        """Set the current value of a property (temporary change).

        Only `value` changes on an existing property; `base_value` is kept so
        the next update re-derives from it. Creates the property if absent.

        Raises:
            ReadonlyPropertyError: If the property is readonly.
        """
        prop = self._writable(name)
        if prop is None:
            self.properties[name] = Property(name, value)
        else:
            prop.value = value

    def set_base_property(self, name: str, base_value: Any) -> None:
        """Set base and current value of a property (permanent change).

        Creates the property if absent.

        Raises:
            ReadonlyPropertyError: If the property is readonly.
        """
        prop = self._writable(name)
        if prop is None:
            self.properties[name] = Property(name, base_value)
        else:
            prop.base_value = base_value
            prop.value = base_value

    def add_property_modifier(self, property_name: str, modifier: Modifier) -> None:
        """Attach a modifier to an existing property.

        A modifier with the same source is replaced in place.

        Raises:
            PropertyNotFoundError: If the property doesn't exist.
            ReadonlyPropertyError: If the property is readonly.
        """
        prop = self._writable(property_name)
        if prop is None:
            raise PropertyNotFoundError(property_name)
        prop.put_modifier(modifier)

    def remove_property_modifier(self, property_name: str, source: str) -> None:
        """Detach the modifier with `source`. No-op if property or modifier is absent.

        Raises:
            ReadonlyPropertyError: If the property is readonly.
        """
        prop = self._writable(property_name)
        if prop is not None:
            prop.discard_modifier(source)

    # --- Lifecycle ---

    def update(self, delta_time: float) -> None:
        """Recompute every property from its base value and modifiers.

        Args:
            delta_time: Seconds since the last tick. Modifiers are not
                time-based, so it only exists for game-loop symmetry.
        """
        for prop in self.properties.values():
            prop.recompute()

    def destroy(self) -> None:
        """Drop all properties. Identity fields stay valid."""
        self.properties = {}

    # --- Traits ---

    def add_trait(self, trait: str) -> None:
        """Add a trait by setting a property of the same name to True.

        A property already holding a non-boolean value has its current value
        overwritten with True; its base value is kept.

        Raises:
            ReadonlyPropertyError: If a readonly property has this name.
        """
        existing = self._writable(trait)
        if (
            self._settings.warn_on_trait_collision
            and existing is not None
            and not isinstance(existing.value, bool)
        ):
            warnings.warn(
                f'add_trait("{trait}") overwrites non-boolean property value '
                f"{existing.value!r} on unit {self._id}.",
                stacklevel=2,
            )
        self.set_property(trait, True)

    def remove_trait(self, trait: str) -> None:
        """Remove a trait by deleting the property. No-op if absent.

        Raises:
            ReadonlyPropertyError: If a readonly property has this name.
        """
        if self._writable(trait) is not None:
            del self.properties[trait]

    def has_trait(self, trait: str) -> bool:
        """Check if trait is present, i.e. its property value is exactly True."""
        prop = self.properties.get(trait)
        return prop is not None and prop.value is True

    def get_traits(self) -> list[str]:
        """List names of all properties whose current value is exactly True."""
        return [name for name, prop in self.properties.items() if prop.value is True]

    # --- Container conveniences ---

    def __contains__(self, name: object) -> bool:
        return name in self.properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __repr__(self) -> str:
        return f"Unit(id={self._id!r}, name={self._name!r}, type={self._type!r})"
