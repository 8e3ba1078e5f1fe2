import math

import pytest

from multigrid.models import Point
from multigrid.pencil import Pencil


def test_line_offsets():
    pencil = Pencil(0.0, 0.2, 2)
    assert len(pencil) == 5
    assert [line.offset for line in pencil.lines] == pytest.approx([-1.8, -0.8, 0.2, 1.2, 2.2])
    assert all(line.angle == 0.0 for line in pencil.lines)


def test_single_line_at_radius_zero():
    pencil = Pencil(1.0, 0.3, 0)
    assert len(pencil) == 1
    assert pencil.lines[0].offset == pytest.approx(0.3)


def test_border_offsets():
    pencil = Pencil(0.0, 0.2, 2)
    assert pencil.lower_border.offset == pytest.approx(-2.8)
    assert pencil.upper_border.offset == pytest.approx(3.2)

    inset = Pencil(0.0, 0.2, 2, inset=0.5)
    assert inset.lower_border.offset == pytest.approx(-2.3)
    assert inset.upper_border.offset == pytest.approx(2.7)
    assert [line.offset for line in inset.lines] == [line.offset for line in pencil.lines]


def test_contains():
    pencil = Pencil(0.0, 0.2, 2)
    assert pencil.contains(Point(3.0, 7.0))
    assert pencil.contains(Point(-2.7, -50.0))
    assert not pencil.contains(Point(3.5, 0.0))
    assert not pencil.contains(Point(-2.9, 0.0))


def test_inset_shrinks_band():
    assert Pencil(0.0, 0.2, 2).contains(Point(3.0, 0.0))
    assert not Pencil(0.0, 0.2, 2, inset=0.5).contains(Point(3.0, 0.0))


def test_contains_rotated_pencil():
    pencil = Pencil(math.pi / 2, 0.0, 1)
    assert pencil.contains(Point(100.0, 1.5))
    assert not pencil.contains(Point(0.0, 2.5))


def test_lane_index():
    pencil = Pencil(0.0, 0.2, 2)
    assert pencil.lane_index(Point(0.5, 0.0)) == 0
    assert pencil.lane_index(Point(-0.1, 3.0)) == -1
    assert pencil.lane_index(Point(1.7, 0.0)) == 1


def test_direction():
    dx, dy = Pencil(math.pi / 2, 0.0, 1).direction
    assert dx == pytest.approx(0.0, abs=1e-12)
    assert dy == pytest.approx(1.0)
