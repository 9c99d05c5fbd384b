"""Errors raised by the property store."""

from __future__ import annotations


class PropertyError(Exception):
    """Base class for property errors. Carries the offending property name."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class PropertyNotFoundError(PropertyError):
    """Raised when a required property does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f'Property "{name}" does not exist')


class ReadonlyPropertyError(PropertyError):
    """Raised when mutating a property marked readonly."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f'Property "{name}" is readonly')
