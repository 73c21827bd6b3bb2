"""Core geometric types for contour representation.

This module defines the fundamental planar types used throughout meshtype:
- Point: A 2D point in output units
- Contour: A closed polygonal loop of a glyph outline
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in output units
        y: Y coordinate in output units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def offset(self, dx: float, dy: float) -> "Point":
        """Return this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass
class Contour:
    """A closed polygonal contour of a glyph outline.

    Points are stored without a duplicate closing point; the edge from the
    last point back to the first is implied. Axes are y-up, so a clockwise
    contour has a negative signed area.

    In the rasterizer convention used here outer (fill) contours are
    clockwise and holes are counter-clockwise.

    Attributes:
        points: Points forming the contour, in traversal order
        clockwise: Winding direction reported for this contour
    """

    points: list[Point]
    clockwise: bool = False
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    @classmethod
    def from_points(cls, points: list[Point]) -> "Contour":
        """Build a contour whose winding flag is derived from its geometry.

        Args:
            points: Points forming the contour

        Returns:
            Contour with ``clockwise`` set from the sign of its area
        """
        contour = cls(points=list(points))
        contour.clockwise = contour.signed_area() < 0
        return contour

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the contour
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    def translated(self, dx: float, dy: float) -> "Contour":
        """Return a copy of this contour moved by (dx, dy).

        Args:
            dx: Horizontal offset
            dy: Vertical offset

        Returns:
            New contour with the same winding flag
        """
        return Contour(
            points=[p.offset(dx, dy) for p in self.points],
            clockwise=self.clockwise,
        )

    def reversed(self) -> "Contour":
        """Return a copy with the traversal order and winding flag flipped."""
        return Contour(points=list(reversed(self.points)), clockwise=not self.clockwise)
