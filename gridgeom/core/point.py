"""Integer grid point value type."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

import numpy as np

from gridgeom.core.direction import Direction
from gridgeom.core.errors import DivisionByZeroError, InvalidArgumentError

VEC2_DTYPE = np.float64


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if not math.isfinite(value):
        raise InvalidArgumentError(f"cannot round non-finite coordinate {value!r}")
    whole = math.trunc(value)
    # value - whole is exact for any finite float.
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


def _is_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _is_float(value: object) -> bool:
    return isinstance(value, (float, np.floating))


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """Integer 2D coordinate; y grows southwards.

    Arithmetic never mutates: every operator returns a new point. Integer
    operands keep the math exact, float operands (``float``, float pairs or
    numpy vectors) go through :data:`VEC2_DTYPE` and are rounded back with
    :func:`round_half_away`.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not _is_int(value):
                raise InvalidArgumentError(f"Point.{name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))

    @classmethod
    def zero(cls) -> Point:
        return cls(0, 0)

    @classmethod
    def from_tuple(cls, pair: tuple[int, int]) -> Point:
        x, y = pair
        return cls(x, y)

    @classmethod
    def from_direction(cls, direction: Direction) -> Point:
        return cls(direction.dx, direction.dy)

    @classmethod
    def from_vec2(cls, vec: object) -> Point:
        """Build a point from a float 2-vector, rounding half away from zero."""
        arr = np.asarray(vec, dtype=VEC2_DTYPE)
        if arr.shape != (2,):
            raise InvalidArgumentError(f"expected a 2-vector, got shape {arr.shape}")
        return cls(round_half_away(float(arr[0])), round_half_away(float(arr[1])))

    @classmethod
    def from_index(cls, index: int, width: int) -> Point:
        """Inverse of :meth:`to_index` for a row-major grid."""
        if width <= 0:
            raise InvalidArgumentError(f"grid width must be positive, got {width}")
        if index < 0:
            raise InvalidArgumentError(f"grid index must be non-negative, got {index}")
        y, x = divmod(index, width)
        return cls(x, y)

    @classmethod
    def random(cls, rng: random.Random, horizontal: range, vertical: range) -> Point:
        """Uniform point with ``x`` in ``horizontal`` and ``y`` in ``vertical``."""
        if len(horizontal) == 0 or len(vertical) == 0:
            raise InvalidArgumentError("random point ranges must not be empty")
        return cls(rng.choice(horizontal), rng.choice(vertical))

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_vec2(self) -> np.ndarray:
        return np.array((self.x, self.y), dtype=VEC2_DTYPE)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def to_index(self, width: int) -> int:
        """Row-major index ``y * width + x`` of this point in a grid."""
        if width <= 0:
            raise InvalidArgumentError(f"grid width must be positive, got {width}")
        if self.x < 0 or self.y < 0 or self.x >= width:
            raise InvalidArgumentError(f"{self} has no index in a grid of width {width}")
        return self.y * width + self.x

    def direction_to(self, other: Point) -> Direction:
        return Direction.from_delta(other.x - self.x, other.y - self.y)

    def distance_squared_to(self, other: Point) -> int:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: Point) -> float:
        return math.sqrt(self.distance_squared_to(other))

    def line_to(self, other: Point) -> list[Point]:
        """Bresenham line from this point to ``other``, both endpoints included."""
        x, y = self.x, self.y
        dx = abs(other.x - x)
        dy = -abs(other.y - y)
        sx = 1 if x < other.x else -1
        sy = 1 if y < other.y else -1
        err = dx + dy
        points: list[Point] = []
        while True:
            points.append(Point(x, y))
            if x == other.x and y == other.y:
                return points
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x += sx
            if e2 <= dx:
                err += dx
                y += sy

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Point):
            return self.x == other.x and self.y == other.y
        if isinstance(other, tuple) and len(other) == 2:
            return self.x == other[0] and self.y == other[1]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __add__(self, other: object) -> Point:
        offset = _int_pair(other)
        if offset is not None:
            return Point(self.x + offset[0], self.y + offset[1])
        vec = _float_vec(other)
        if vec is not None:
            return Point.from_vec2(self.to_vec2() + vec)
        return NotImplemented

    def __sub__(self, other: object) -> Point:
        offset = _int_pair(other)
        if offset is not None:
            return Point(self.x - offset[0], self.y - offset[1])
        vec = _float_vec(other)
        if vec is not None:
            return Point.from_vec2(self.to_vec2() - vec)
        return NotImplemented

    def __mul__(self, other: object) -> Point:
        if _is_int(other):
            return Point(self.x * int(other), self.y * int(other))
        factors = _int_pair(other, allow_direction=False)
        if factors is not None:
            return Point(self.x * factors[0], self.y * factors[1])
        if _is_float(other):
            return Point.from_vec2(self.to_vec2() * float(other))
        vec = _float_vec(other)
        if vec is not None:
            return Point.from_vec2(self.to_vec2() * vec)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Point:
        if _is_int(other):
            return self._int_div(int(other), int(other))
        divisors = _int_pair(other, allow_direction=False)
        if divisors is not None:
            return self._int_div(*divisors)
        if _is_float(other):
            vec = np.array((other, other), dtype=VEC2_DTYPE)
        else:
            vec = _float_vec(other)
            if vec is None:
                return NotImplemented
        if np.any(vec == 0):
            raise DivisionByZeroError(f"cannot divide {self} by {other!r}")
        return Point.from_vec2(self.to_vec2() / vec)

    def _int_div(self, dx: int, dy: int) -> Point:
        # Integer division truncates toward zero.
        if dx == 0 or dy == 0:
            raise DivisionByZeroError(f"cannot divide {self} by ({dx}, {dy})")
        return Point(_trunc_div(self.x, dx), _trunc_div(self.y, dy))


def _int_pair(value: object, *, allow_direction: bool = True) -> tuple[int, int] | None:
    if isinstance(value, Point):
        return value.x, value.y
    if allow_direction and isinstance(value, Direction):
        return value.offset
    if isinstance(value, tuple) and len(value) == 2 and all(_is_int(v) for v in value):
        return int(value[0]), int(value[1])
    return None


def _float_vec(value: object) -> np.ndarray | None:
    if isinstance(value, np.ndarray):
        if value.shape != (2,):
            raise InvalidArgumentError(f"expected a 2-vector, got shape {value.shape}")
        return value.astype(VEC2_DTYPE)
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and all(_is_int(v) or _is_float(v) for v in value)
    ):
        return np.array(value, dtype=VEC2_DTYPE)
    return None
