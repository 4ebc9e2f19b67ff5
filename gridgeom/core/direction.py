"""Compass directions on a y-down grid."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from gridgeom.core.point import Point


class Direction(StrEnum):
    """Eight compass directions plus ``HERE`` for staying in place.

    Increasing y points south, so ``NORTH`` moves to ``(0, -1)``.
    """

    HERE = "HERE"
    NORTH = "NORTH"
    NORTH_EAST = "NORTH_EAST"
    EAST = "EAST"
    SOUTH_EAST = "SOUTH_EAST"
    SOUTH = "SOUTH"
    SOUTH_WEST = "SOUTH_WEST"
    WEST = "WEST"
    NORTH_WEST = "NORTH_WEST"

    @property
    def offset(self) -> tuple[int, int]:
        return DIRECTION_OFFSETS[self]

    @property
    def dx(self) -> int:
        return DIRECTION_OFFSETS[self][0]

    @property
    def dy(self) -> int:
        return DIRECTION_OFFSETS[self][1]

    def is_here(self) -> bool:
        return self is Direction.HERE

    def to_vec2(self) -> np.ndarray:
        """Return the unit offset as a float vector."""
        return np.array(DIRECTION_OFFSETS[self], dtype=np.float64)

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Direction:
        """Map the signs of a delta to a direction; ``(0, 0)`` is ``HERE``."""
        return _BY_SIGN[(_sign(dx), _sign(dy))]

    @classmethod
    def from_point(cls, point: Point) -> Direction:
        return cls.from_delta(point.x, point.y)


DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.HERE: (0, 0),
    Direction.NORTH: (0, -1),
    Direction.NORTH_EAST: (1, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH: (0, 1),
    Direction.SOUTH_WEST: (-1, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTH_WEST: (-1, -1),
}

_BY_SIGN: dict[tuple[int, int], Direction] = {
    offset: direction for direction, offset in DIRECTION_OFFSETS.items()
}

# Clockwise from east.
DIR8: tuple[Direction, ...] = (
    Direction.EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH,
    Direction.SOUTH_WEST,
    Direction.WEST,
    Direction.NORTH_WEST,
    Direction.NORTH,
    Direction.NORTH_EAST,
)

DIR9: tuple[Direction, ...] = (Direction.HERE, *DIR8)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
