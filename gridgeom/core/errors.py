"""Typed failures raised by geometry operations."""

from __future__ import annotations


class GridGeomError(Exception):
    """Base class for all gridgeom failures."""


class DivisionByZeroError(GridGeomError, ZeroDivisionError):
    """Point divided by a zero scalar or zero component."""


class InvalidArgumentError(GridGeomError, ValueError):
    """Argument outside the domain of an operation."""


class InvalidConversionError(GridGeomError, ValueError):
    """Narrowing conversion between direction types failed."""

    def __init__(self, source: object, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"cannot convert {source!s} to {target}")


class SerializationError(GridGeomError, ValueError):
    """Structured payload does not describe a valid value."""
