"""Midpoint circle outlines and precomputed tables for common radii."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from gridgeom.core.errors import InvalidArgumentError
from gridgeom.core.point import Point

logger = logging.getLogger(__name__)

TABLE_RADII: tuple[int, ...] = (5, 7, 9, 11, 13)


def circle(center: Point, radius: int) -> list[Point]:
    """Return the outline of a circle as an ordered list of distinct points.

    The traversal starts at the rightmost point ``(cx + r, cy)`` and runs
    counter-clockwise as drawn on a y-down grid (east, north, west, south),
    so consecutive points are 8-connected neighbours. Radius 0 yields only
    ``center``.
    """
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise InvalidArgumentError(f"radius must be an int, got {radius!r}")
    if radius < 0:
        raise InvalidArgumentError(f"radius must be non-negative, got {radius}")
    offsets = CIRCLE_TABLES.get(radius)
    if offsets is None:
        offsets = _outline_offsets(radius)
    return [Point(center.x + p.x, center.y + p.y) for p in offsets]


def _first_octant(radius: int) -> list[tuple[int, int]]:
    # Integer midpoint walk from (r, 0) up to the 45 degree diagonal.
    x, y = radius, 0
    err = 1 - radius
    octant: list[tuple[int, int]] = []
    while x >= y:
        octant.append((x, y))
        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x) + 1
    return octant


def _outline_offsets(radius: int) -> tuple[Point, ...]:
    octant = _first_octant(radius)
    backward = octant[::-1]
    # Math orientation (y up), each octant walked by increasing angle.
    arcs = (
        [(x, y) for x, y in octant],
        [(y, x) for x, y in backward],
        [(-y, x) for x, y in octant],
        [(-x, y) for x, y in backward],
        [(-x, -y) for x, y in octant],
        [(-y, -x) for x, y in backward],
        [(y, -x) for x, y in octant],
        [(x, -y) for x, y in backward],
    )
    seen: set[tuple[int, int]] = set()
    outline: list[Point] = []
    for arc in arcs:
        for mx, my in arc:
            if (mx, my) in seen:
                continue
            seen.add((mx, my))
            # Flip to the y-down grid.
            outline.append(Point(mx, -my))
    return tuple(outline)


def _build_tables() -> dict[int, tuple[Point, ...]]:
    tables = {radius: _outline_offsets(radius) for radius in TABLE_RADII}
    logger.debug(
        "circle_tables_built radii=%s sizes=%s",
        TABLE_RADII,
        [len(tables[radius]) for radius in TABLE_RADII],
    )
    return tables


CIRCLE_TABLES: Mapping[int, tuple[Point, ...]] = MappingProxyType(_build_tables())
CIRCLE5 = CIRCLE_TABLES[5]
CIRCLE7 = CIRCLE_TABLES[7]
CIRCLE9 = CIRCLE_TABLES[9]
CIRCLE11 = CIRCLE_TABLES[11]
CIRCLE13 = CIRCLE_TABLES[13]
