"""Integer grid geometry: points, directions, lines and circles."""

from gridgeom.core import (
    CIRCLE5,
    CIRCLE7,
    CIRCLE9,
    CIRCLE11,
    CIRCLE13,
    CIRCLE_TABLES,
    DIR8,
    DIR9,
    Direction,
    DivisionByZeroError,
    GridGeomError,
    InvalidArgumentError,
    InvalidConversionError,
    Point,
    SerializationError,
    TwoDimDirection,
    circle,
    round_half_away,
)
from gridgeom.core.serialization import (
    direction_to_payload,
    dumps,
    loads,
    payload_to_direction,
    payload_to_point,
    payload_to_points,
    payload_to_two_dim_direction,
    point_to_payload,
    points_to_payload,
)

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
    "direction_to_payload",
    "dumps",
    "loads",
    "payload_to_direction",
    "payload_to_point",
    "payload_to_points",
    "payload_to_two_dim_direction",
    "point_to_payload",
    "points_to_payload",
    "round_half_away",
]
