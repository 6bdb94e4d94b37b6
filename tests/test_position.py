import dataclasses

import pytest

from blocktris.constants import Rotation
from blocktris.position import Point, Position


def test_position_defaults_to_origin():
    assert Position() == Position(0, 0)


def test_position_add_and_sub_round_trip():
    a = Position(3, -2)
    b = Position(-5, 7)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_position_add_is_componentwise():
    a = Position(3, -2)
    b = Position(4, 5)
    result = a + b
    assert result.x == a.x + b.x
    assert result.y == a.y + b.y


def test_position_swapped_twice_is_identity():
    p = Position(4, 9)
    assert p.swapped() == Position(9, 4)
    assert p.swapped().swapped() == p


def test_position_is_immutable():
    p = Position(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5
    assert p == Position(1, 2)
    assert p.x == 1


def test_point_absolute_is_axis_plus_relative():
    pt = Point(Position(5, 20), Position(-1, 1))
    assert (pt.x, pt.y) == (4, 21)
    assert (pt.rel_x, pt.rel_y) == (-1, 1)


def test_point_iadd_moves_axis_only():
    pt = Point(Position(5, 20), Position(1, 0))
    pt += Position(0, -1)
    assert pt.axis == Position(5, 19)
    assert pt.relative == Position(1, 0)
    pt -= Position(0, -1)
    assert pt.axis == Position(5, 20)


def test_point_rotate_clockwise_value():
    pt = Point(Position(0, 0), Position(1, 0))
    pt.rotate(Rotation.CW)
    assert pt.relative == Position(0, -1)


@pytest.mark.parametrize("rel", [Position(1, 0), Position(-1, 1), Position(2, 0), Position(0, -1)])
def test_point_rotate_four_times_is_identity(rel):
    for direction in (Rotation.CW, Rotation.CCW):
        pt = Point(Position(5, 5), rel)
        for _ in range(4):
            pt.rotate(direction)
        assert pt.relative == rel


@pytest.mark.parametrize("rel", [Position(1, 1), Position(-1, 0), Position(0, 2)])
def test_point_rotate_then_reverse_restores(rel):
    pt = Point(Position(3, 4), rel)
    pt.rotate(Rotation.CW)
    pt.rotate(-Rotation.CW)
    assert pt.relative == rel
    assert pt.axis == Position(3, 4)


def test_point_copy_is_independent():
    pt = Point(Position(2, 3), Position(1, 1))
    dup = pt.copy()
    dup += Position(1, 1)
    dup.rotate(Rotation.CW)
    assert pt == Point(Position(2, 3), Position(1, 1))
    assert dup.axis == Position(3, 4)