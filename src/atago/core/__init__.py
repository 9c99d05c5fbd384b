"""Core functionalities: stateless value types and the modifier fold.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For the stateful property store, see unit/.
"""

from atago.core.modifier import (
    Constant,
    Effect,
    Modifier,
    Transform,
    apply_modifiers,
    sort_modifiers,
)
from atago.core.types import (
    Position,
    PropertyMap,
    PropertyScalar,
    PropertyValue,
    UnitPosition,
    is_position,
    is_unit_position,
)

__all__ = [
    # Types
    "PropertyScalar",
    "PropertyMap",
    "PropertyValue",
    "Position",
    "UnitPosition",
    "is_position",
    "is_unit_position",
    # Modifiers
    "Modifier",
    "Constant",
    "Transform",
    "Effect",
    "apply_modifiers",
    "sort_modifiers",
]
