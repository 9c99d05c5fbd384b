"""Property value types.

Usage:
    pos = UnitPosition(unit_id="player-1", map_id="overworld", position=Position(3, 4))
    unit.set_property("position", pos)

    stats: PropertyMap = {"str": 10, "dex": 12}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeGuard

type PropertyScalar = str | int | float | bool | None
"""Single scalar value a property (or a PropertyMap entry) can hold."""

type PropertyMap = dict[str, PropertyScalar]
"""Flat string-keyed mapping of scalars, e.g. a stat block."""


@dataclass(frozen=True, slots=True)
class Position:
    """Point on a map. `z` is only set for 3D maps."""

    x: int | float
    y: int | float
    z: int | float | None = None


@dataclass(frozen=True, slots=True)
class UnitPosition:
    """Location of a unit on a specific map."""

    unit_id: str
    map_id: str
    position: Position

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain `{unitId, mapId, position}` record shape."""
        position: dict[str, int | float] = {"x": self.position.x, "y": self.position.y}
        if self.position.z is not None:
            position["z"] = self.position.z
        return {"unitId": self.unit_id, "mapId": self.map_id, "position": position}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UnitPosition:
        """Create from a plain record.

        Raises:
            ValueError: If the record is not unit-position shaped.
        """
        if not is_unit_position(data):
            raise ValueError(f"Not a unit position record: {data!r}")
        pos = data["position"]
        return cls(
            unit_id=data["unitId"],
            map_id=data["mapId"],
            position=Position(x=pos["x"], y=pos["y"], z=pos.get("z")),
        )


type PropertyValue = PropertyScalar | PropertyMap | UnitPosition
"""Closed set of values a property can hold."""


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_position(value: object) -> TypeGuard[Position | Mapping[str, Any]]:
    """Check if value is a Position or a mapping with numeric x and y.

    Args:
        value: Value to check.

    Returns:
        True if value can be treated as a position.
    """
    if isinstance(value, Position):
        return True
    if not isinstance(value, Mapping):
        return False
    return _is_number(value.get("x")) and _is_number(value.get("y"))


def is_unit_position(value: object) -> TypeGuard[UnitPosition | Mapping[str, Any]]:
    """Check if value is a UnitPosition or a unit-position shaped mapping.

    Args:
        value: Value to check.

    Returns:
        True if value has string unitId/mapId and a position-shaped position.
    """
    if isinstance(value, UnitPosition):
        return True
    if not isinstance(value, Mapping):
        return False
    return (
        isinstance(value.get("unitId"), str)
        and isinstance(value.get("mapId"), str)
        and is_position(value.get("position"))
    )
