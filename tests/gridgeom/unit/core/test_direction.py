import numpy as np
import pytest

from gridgeom.core.direction import DIR8, DIR9, Direction
from gridgeom.core.point import Point

EXPECTED_OFFSETS = {
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


@pytest.mark.parametrize(("direction", "offset"), list(EXPECTED_OFFSETS.items()))
def test_direction_offsets_use_y_down_convention(direction: Direction, offset: tuple[int, int]) -> None:
    assert direction.offset == offset
    assert (direction.dx, direction.dy) == offset


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize(("x", "y"), [(0, 0), (3, -7), (-4, 12)])
def test_point_plus_direction_applies_offset(direction: Direction, x: int, y: int) -> None:
    dx, dy = EXPECTED_OFFSETS[direction]
    assert Point(x, y) + direction == Point(x + dx, y + dy)
    assert Point(x, y) - direction == Point(x - dx, y - dy)


def test_dir8_and_dir9_membership_and_order() -> None:
    assert len(DIR8) == 8
    assert Direction.HERE not in DIR8
    assert DIR8[0] is Direction.EAST and DIR8[2] is Direction.SOUTH
    assert DIR9 == (Direction.HERE, *DIR8)
    assert set(DIR9) == set(Direction)


def test_is_here_only_for_here() -> None:
    assert Direction.HERE.is_here()
    assert not any(direction.is_here() for direction in DIR8)


def test_from_delta_uses_signs_only() -> None:
    assert Direction.from_delta(10, 20) is Direction.SOUTH_EAST
    assert Direction.from_delta(-3, 0) is Direction.WEST
    assert Direction.from_delta(0, -9) is Direction.NORTH
    assert Direction.from_delta(0, 0) is Direction.HERE


def test_from_point_and_direction_to() -> None:
    assert Direction.from_point(Point(10, 20)) is Direction.SOUTH_EAST
    assert Point(1, 2).direction_to(Point(3, 4)) is Direction.SOUTH_EAST
    assert Point(3, 4).direction_to(Point(3, 4)) is Direction.HERE


def test_direction_to_vec2_and_point_round_trip() -> None:
    assert np.array_equal(Direction.NORTH_WEST.to_vec2(), np.array([-1.0, -1.0]))
    for direction in DIR9:
        assert Direction.from_point(Point.from_direction(direction)) is direction
