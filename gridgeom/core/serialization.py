"""Structured payload codec for geometry values."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any, TypeVar

import orjson

from gridgeom.core.direction import Direction
from gridgeom.core.errors import SerializationError
from gridgeom.core.point import Point
from gridgeom.core.two_dim_direction import TwoDimDirection

_E = TypeVar("_E", bound=StrEnum)


def point_to_payload(point: Point) -> dict[str, int]:
    """Convert a point to a JSON-serializable ``{"x", "y"}`` object."""
    return {"x": point.x, "y": point.y}


def payload_to_point(payload: object) -> Point:
    """Convert a loaded ``{"x", "y"}`` object into a point."""
    if not isinstance(payload, dict):
        raise SerializationError("Point payload must be an object.")
    try:
        raw_x = payload["x"]
        raw_y = payload["y"]
    except KeyError as exc:
        raise SerializationError(f"Point payload is missing field {exc.args[0]!r}.") from exc
    for name, value in (("x", raw_x), ("y", raw_y)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise SerializationError(f"Point field {name!r} must be an integer.")
    return Point(raw_x, raw_y)


def points_to_payload(points: Iterable[Point]) -> list[dict[str, int]]:
    return [point_to_payload(point) for point in points]


def payload_to_points(payload: object) -> list[Point]:
    if not isinstance(payload, list):
        raise SerializationError("Point list payload must be a list.")
    return [payload_to_point(item) for item in payload]


def direction_to_payload(direction: Direction | TwoDimDirection) -> str:
    return direction.value


def payload_to_direction(payload: object) -> Direction:
    return _enum_from_payload(Direction, payload)


def payload_to_two_dim_direction(payload: object) -> TwoDimDirection:
    return _enum_from_payload(TwoDimDirection, payload)


def dumps(payload: Any) -> bytes:
    """Serialize a payload to UTF-8 JSON bytes."""
    return orjson.dumps(payload)


def loads(data: bytes | str) -> Any:
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        raise SerializationError(f"Malformed JSON: {exc}") from exc


def _enum_from_payload(enum_type: type[_E], payload: object) -> _E:
    if not isinstance(payload, str):
        raise SerializationError(f"{enum_type.__name__} payload must be a string.")
    try:
        return enum_type(payload)
    except ValueError as exc:
        raise SerializationError(f"Unknown {enum_type.__name__}: {payload!r}.") from exc
