import math

import pytest

from multigrid.geometry import MultigridInvariantError
from multigrid.models import Line, Point


class TestPoint:

    def test_negative_zero_is_normalised(self):
        p = Point(-0.0, -0.0)
        assert math.copysign(1.0, p.x) == 1.0
        assert math.copysign(1.0, p.y) == 1.0
        assert p == Point(0.0, 0.0)

    def test_usable_as_dict_key(self):
        lookup = {Point(1, 2): "a"}
        assert lookup[Point(1.0, 2.0)] == "a"

    def test_distance(self):
        assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5.0)
        assert Point(3, 4).distance() == pytest.approx(5.0)

    def test_midpoint(self):
        assert Point(0, 0).midpoint(Point(2, -4)) == Point(1, -2)

    def test_toward(self):
        p = Point(0, 0).toward(Point(2, 0), 0.5)
        assert p.x == pytest.approx(0.5)
        assert p.y == pytest.approx(0.0)

    def test_toward_same_point_raises(self):
        with pytest.raises(ValueError):
            Point(1, 1).toward(Point(1, 1), 1.0)

    def test_rotate_and_shift(self):
        rotated = Point(1, 0).rotate_and_shift(math.pi / 2, 0.0)
        assert rotated.x == pytest.approx(0.0, abs=1e-12)
        assert rotated.y == pytest.approx(1.0)

        shifted = Point(0, 0).rotate_and_shift(0.0, 2.0)
        assert shifted == Point(0.0, 2.0)

    def test_rounded(self):
        assert Point(0.1234567, 1.0000004).rounded(1e-6) == Point(0.123457, 1.0)


class TestLine:

    def test_intersect_perpendicular(self):
        point = Line(0.0, 1.0).intersect(Line(math.pi / 2, 2.0))
        assert point is not None
        assert point.x == pytest.approx(1.0)
        assert point.y == pytest.approx(2.0)

    def test_intersect_is_on_both_lines(self):
        a = Line(2 * math.pi / 5, 0.7)
        b = Line(6 * math.pi / 5, -1.3)
        point = a.intersect(b)
        assert a.contains_point(point)
        assert b.contains_point(point)

    def test_parallel_lines_do_not_intersect(self):
        assert Line(0.0, 1.0).intersect(Line(0.0, 2.0)) is None

    def test_antiparallel_lines_do_not_intersect(self):
        assert Line(0.0, 1.0).intersect(Line(math.pi, 1.0)) is None

    def test_near_parallel_lines_do_not_intersect(self):
        assert Line(0.0, 0.0).intersect(Line(1e-12, 1.0)) is None

    def test_contains_point(self):
        line = Line(0.0, 1.0)
        assert line.contains_point(Point(1.0, 5.0))
        assert not line.contains_point(Point(1.1, 5.0))
        assert line.contains_point(Point(1.05, 0.0), epsilon=0.1)

    def test_ordering_key_sorts_along_line(self):
        line = Line(0.0, 1.0)
        points = [Point(1, 3), Point(1, -2), Point(1, 0)]
        ordered = sorted(points, key=line.ordering_key)
        assert ordered == [Point(1, 3), Point(1, 0), Point(1, -2)]

    def test_ordering_key_off_line_raises(self):
        with pytest.raises(MultigridInvariantError):
            Line(0.0, 1.0).ordering_key(Point(2.0, 0.0))

    def test_equality_ignores_cached_trig(self):
        a = Line(0.5, 1.0)
        b = Line(0.5, 1.0)
        assert a == b
        assert hash(a) == hash(b)
        assert a.sin == pytest.approx(math.sin(0.5))
        assert a.cos == pytest.approx(math.cos(0.5))
