"""Unit tests for geometric primitives and curve flattening."""

import pytest

from meshtype.core.geometry import (
    point_in_polygon,
    point_on_segment,
    triangle_normal,
    triangle_signed_area,
)
from meshtype.domain import Point
from meshtype.io._bezier import flatten_cubic, flatten_quadratic

SQUARE = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]

# U shape opening upwards
U_SHAPE = [
    Point(0, 0), Point(30, 0), Point(30, 30), Point(20, 30),
    Point(20, 10), Point(10, 10), Point(10, 30), Point(0, 30),
]


class TestPointInPolygon:
    """Tests for point_in_polygon function."""

    def test_center_inside(self):
        """Test center point is inside."""
        assert point_in_polygon(Point(1.0, 1.0), SQUARE)

    def test_outside(self):
        """Test far point is outside."""
        assert not point_in_polygon(Point(5.0, 1.0), SQUARE)

    def test_boundary_inclusive(self):
        """Test boundary points count only when inclusive."""
        assert point_in_polygon(Point(2.0, 1.0), SQUARE, inclusive=True)
        assert point_in_polygon(Point(0.0, 0.0), SQUARE, inclusive=True)
        assert not point_in_polygon(Point(2.5, 1.0), SQUARE, inclusive=True)

    def test_non_convex_notch(self):
        """Test the notch of a U shape is outside."""
        assert not point_in_polygon(Point(15, 20), U_SHAPE)
        assert point_in_polygon(Point(5, 20), U_SHAPE)
        assert point_in_polygon(Point(15, 5), U_SHAPE)

    def test_too_few_points(self):
        """Test degenerate polygon contains nothing."""
        assert not point_in_polygon(Point(0, 0), [Point(0, 0), Point(1, 0)], inclusive=True)


class TestPointOnSegment:
    """Tests for point_on_segment function."""

    def test_on_segment(self):
        """Test midpoint lies on the segment."""
        assert point_on_segment(Point(1, 1), Point(0, 0), Point(2, 2))

    def test_beyond_end(self):
        """Test collinear point past the end is not on the segment."""
        assert not point_on_segment(Point(3, 3), Point(0, 0), Point(2, 2))

    def test_off_line(self):
        """Test point beside the segment."""
        assert not point_on_segment(Point(1, 1.1), Point(0, 0), Point(2, 2))

    def test_zero_length_segment(self):
        """Test a zero length segment only holds its own point."""
        assert point_on_segment(Point(1, 1), Point(1, 1), Point(1, 1))
        assert not point_on_segment(Point(1, 2), Point(1, 1), Point(1, 1))


class TestTriangles:
    """Tests for triangle helpers."""

    def test_triangle_signed_area(self):
        """Test counter-clockwise triangle area is positive."""
        assert triangle_signed_area((0, 0), (1, 0), (0, 1)) == pytest.approx(0.5)
        assert triangle_signed_area((0, 0), (0, 1), (1, 0)) == pytest.approx(-0.5)

    def test_triangle_normal(self):
        """Test normal follows the right-hand rule."""
        assert triangle_normal((0, 0, 0), (1, 0, 0), (0, 1, 0)) == (0, 0, 1)
        assert triangle_normal((0, 0, 0), (0, 1, 0), (1, 0, 0)) == (0, 0, -1)


class TestFlattening:
    """Tests for Bezier flattening."""

    def test_quadratic_steps(self):
        """Test quadratic curve yields one point per step ending on p2."""
        control = [Point(0, 0), Point(1, 2), Point(2, 0)]
        points = flatten_quadratic(control, 4)
        assert len(points) == 4
        assert points[-1] == Point(2, 0)
        assert points[1] == Point(1.0, 1.0)

    def test_quadratic_single_step(self):
        """Test one step degenerates to the chord."""
        control = [Point(0, 0), Point(1, 2), Point(2, 0)]
        assert flatten_quadratic(control, 1) == [Point(2, 0)]

    def test_cubic_steps(self):
        """Test cubic curve yields one point per step ending on p3."""
        control = [Point(0, 0), Point(0, 3), Point(3, 3), Point(3, 0)]
        points = flatten_cubic(control, 2)
        assert len(points) == 2
        assert points[0].x == pytest.approx(1.5)
        assert points[0].y == pytest.approx(2.25)
        assert points[-1] == Point(3, 0)
