"""Unit and property state.

Architecture Note:
    unit/ is the stateful layer. Unlike core/ (stateless functionalities),
    it owns mutable property stores and drives recomputation.
"""

from atago.unit.errors import PropertyError, PropertyNotFoundError, ReadonlyPropertyError
from atago.unit.property import Property
from atago.unit.protocol import PropertyContainer, TraitHolder
from atago.unit.unit import Unit

__all__ = [
    "Unit",
    "Property",
    "PropertyContainer",
    "TraitHolder",
    "PropertyError",
    "PropertyNotFoundError",
    "ReadonlyPropertyError",
]
