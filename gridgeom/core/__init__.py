"""Grid geometry value types and rasterizers."""

from gridgeom.core.circles import (
    CIRCLE5,
    CIRCLE7,
    CIRCLE9,
    CIRCLE11,
    CIRCLE13,
    CIRCLE_TABLES,
    circle,
)
from gridgeom.core.direction import DIR8, DIR9, Direction
from gridgeom.core.errors import (
    DivisionByZeroError,
    GridGeomError,
    InvalidArgumentError,
    InvalidConversionError,
    SerializationError,
)
from gridgeom.core.point import Point, round_half_away
from gridgeom.core.two_dim_direction import TwoDimDirection

__all__ = [
    "CIRCLE11",
    "CIRCLE13",
    "CIRCLE5",
    "CIRCLE7",
    "CIRCLE9",
    "CIRCLE_TABLES",
    "DIR8",
    "DIR9",
    "Direction",
    "DivisionByZeroError",
    "GridGeomError",
    "InvalidArgumentError",
    "InvalidConversionError",
    "Point",
    "SerializationError",
    "TwoDimDirection",
    "circle",
    "round_half_away",
]
