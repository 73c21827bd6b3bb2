"""Unit tests for domain models.

Tests for Point, Contour, GlyphOutline, CharacterOutline, LayoutState and
TextMesh.
"""

import numpy as np
import pytest

from meshtype.domain import CharacterOutline, Contour, LayoutState, Point, TextMesh


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self):
        """Test creating a point."""
        p = Point(1.5, -2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_point_immutable(self):
        """Test that Point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore[misc]

    def test_point_hashable(self):
        """Test that equal points hash equally."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    def test_to_tuple(self):
        """Test conversion to tuple."""
        assert Point(3.0, 4.0).to_tuple() == (3.0, 4.0)

    def test_offset(self):
        """Test moving a point."""
        assert Point(1.0, 1.0).offset(2.0, -1.0) == Point(3.0, 0.0)


class TestContour:
    """Tests for Contour class."""

    def test_signed_area_clockwise(self, make_square):
        """Test clockwise square has negative area."""
        contour = make_square(0, 0, 10)
        assert contour.signed_area() == pytest.approx(-100.0)
        assert contour.clockwise

    def test_signed_area_counter_clockwise(self, make_square):
        """Test counter-clockwise square has positive area."""
        contour = make_square(0, 0, 10, clockwise=False)
        assert contour.signed_area() == pytest.approx(100.0)
        assert not contour.clockwise

    def test_degenerate_area(self):
        """Test contour with fewer than 3 points has zero area."""
        contour = Contour(points=[Point(0, 0), Point(1, 1)])
        assert contour.signed_area() == 0.0

    def test_translated(self, make_square):
        """Test translation keeps the winding flag."""
        contour = make_square(0, 0, 10)
        moved = contour.translated(5, -2)
        assert moved.points[0] == Point(5, -2)
        assert moved.clockwise == contour.clockwise
        assert moved.signed_area() == pytest.approx(contour.signed_area())

    def test_reversed(self, make_square):
        """Test reversal flips order and winding flag."""
        contour = make_square(0, 0, 10)
        flipped = contour.reversed()
        assert flipped.points == list(reversed(contour.points))
        assert not flipped.clockwise
        assert flipped.signed_area() == pytest.approx(100.0)

    def test_len(self, make_square):
        """Test contour length is its point count."""
        assert len(make_square(0, 0, 1)) == 4


class TestCharacterOutline:
    """Tests for CharacterOutline class."""

    def test_empty_outline(self):
        """Test outline without contours is empty."""
        outline = CharacterOutline(character=" ")
        assert outline.is_empty()
        assert outline.glyph_index is None

    def test_outer_contours(self, make_square):
        """Test fill contours are selected by winding flag."""
        outer = make_square(0, 0, 10)
        inner = make_square(3, 3, 4, clockwise=False)
        outline = CharacterOutline(character="o", contours=[outer, inner], glyph_index=5)
        assert outline.outer_contours() == [outer]
        assert not outline.is_empty()


class TestLayoutState:
    """Tests for LayoutState class."""

    def test_start(self):
        """Test a fresh state has no previous glyph."""
        state = LayoutState.start(3.0, 4.0)
        assert (state.pen_x, state.pen_y) == (3.0, 4.0)
        assert state.previous_glyph == 0
        assert state.previous_rsb_delta == 0

    def test_frozen(self):
        """Test that LayoutState is immutable."""
        state = LayoutState()
        with pytest.raises(AttributeError):
            state.pen_x = 1.0  # type: ignore[misc]


class TestTextMesh:
    """Tests for TextMesh class."""

    def test_empty_mesh(self):
        """Test a new mesh is empty."""
        mesh = TextMesh()
        assert mesh.is_empty()
        assert mesh.vertex_count == 0
        assert mesh.triangle_count == 0

    def test_add_face_creates_three_vertices(self):
        """Test every face gets its own vertices."""
        mesh = TextMesh()
        triangle = ((0, 0, 0), (1, 0, 0), (0, 1, 0))
        mesh.add_face(triangle)
        mesh.add_face(triangle)
        assert mesh.vertex_count == 6
        assert mesh.faces == [(0, 1, 2), (3, 4, 5)]

    def test_add_triangle_bad_index(self):
        """Test referencing a missing vertex raises IndexError."""
        mesh = TextMesh()
        mesh.add_vertex((0, 0, 0))
        with pytest.raises(IndexError):
            mesh.add_triangle(0, 1, 2)

    def test_triangles_round_trip(self):
        """Test triangles are returned as corner positions."""
        mesh = TextMesh()
        triangle = ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 2.0))
        mesh.add_face(triangle)
        assert mesh.triangles() == [triangle]

    def test_arrays(self):
        """Test numpy views of the mesh."""
        mesh = TextMesh()
        mesh.add_face(((0, 0, 0), (1, 0, 0), (0, 1, 0)))
        assert mesh.vertex_array().shape == (3, 3)
        assert mesh.vertex_array().dtype == np.float64
        assert mesh.face_array().tolist() == [[0, 1, 2]]

    def test_empty_arrays(self):
        """Test arrays of an empty mesh keep their column count."""
        mesh = TextMesh()
        assert mesh.vertex_array().shape == (0, 3)
        assert mesh.face_array().shape == (0, 3)

    def test_bounds(self):
        """Test axis-aligned bounds."""
        mesh = TextMesh()
        mesh.add_face(((0, 0, 0), (4, 0, 0), (0, 2, 5)))
        assert mesh.bounds() == ((0.0, 0.0, 0.0), (4.0, 2.0, 5.0))

    def test_bounds_empty(self):
        """Test bounds of an empty mesh raise ValueError."""
        with pytest.raises(ValueError):
            TextMesh().bounds()
