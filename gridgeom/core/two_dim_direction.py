"""Horizontal-only direction subset."""

from __future__ import annotations

from enum import StrEnum

from gridgeom.core.direction import Direction
from gridgeom.core.errors import InvalidConversionError


class TwoDimDirection(StrEnum):
    """East/west facing, e.g. for side-view sprites."""

    EAST = "EAST"
    WEST = "WEST"

    @property
    def dx(self) -> int:
        return 1 if self is TwoDimDirection.EAST else -1

    def to_direction(self) -> Direction:
        return Direction.EAST if self is TwoDimDirection.EAST else Direction.WEST

    @classmethod
    def from_direction(cls, direction: Direction) -> TwoDimDirection:
        """Narrow a compass direction; only ``EAST`` and ``WEST`` convert."""
        if direction is Direction.EAST:
            return cls.EAST
        if direction is Direction.WEST:
            return cls.WEST
        raise InvalidConversionError(direction, cls.__name__)
