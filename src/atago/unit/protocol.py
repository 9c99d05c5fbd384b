"""Protocols for property containers and trait holders.

Collaborators (trait utilities, game loops) depend on these instead of Unit so
any entity type exposing the same surface can be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from atago.core.modifier import Modifier
    from atago.unit.property import Property


@runtime_checkable
class PropertyContainer(Protocol):
    """Owns named properties and recomputes them on update."""

    def get_property(self, name: str) -> Property[Any] | None:
        """Get property by name, None if absent."""
        ...

    def set_property(self, name: str, value: Any) -> None:
        """Set the current value, creating the property if absent."""
        ...

    def set_base_property(self, name: str, base_value: Any) -> None:
        """Set base and current value, creating the property if absent."""
        ...

    def add_property_modifier(self, property_name: str, modifier: Modifier) -> None:
        """Attach modifier to an existing property."""
        ...

    def remove_property_modifier(self, property_name: str, source: str) -> None:
        """Detach modifier by source. No-op if absent."""
        ...

    def update(self, delta_time: float) -> None:
        """Recompute every property."""
        ...


@runtime_checkable
class TraitHolder(Protocol):
    """Read-only trait queries."""

    def has_trait(self, trait: str) -> bool:
        """Check if trait is present and exactly True."""
        ...

    def get_traits(self) -> list[str]:
        """List all present traits."""
        ...
