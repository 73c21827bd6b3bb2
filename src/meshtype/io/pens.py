"""fontTools pen that flattens glyph outlines into polygonal contours.

The pen receives drawing commands from a glyph (or from any code driving a
fontTools pen), approximates every quadratic and cubic segment with a fixed
number of straight segments, scales the points to output units and collects
closed contours.
"""

from fontTools.pens.basePen import BasePen

from meshtype.io._bezier import flatten_cubic, flatten_quadratic
from meshtype.domain import Contour, Point


class FlatteningPen(BasePen):
    """Collects flattened, scaled contours from pen commands.

    BasePen splits multi-point quadratic runs (TrueType implied on-curve
    points) and super-Beziers into single segments, so only one-segment
    callbacks are implemented here.

    Example:
        pen = FlatteningPen(bezier_steps=4, scale=0.064, glyphSet=glyph_set)
        glyph_set["O"].draw(pen)
        contours = pen.contours

    Attributes:
        contours: Closed contours collected so far, each with at least 3 points
    """

    def __init__(self, bezier_steps: int = 4, scale: float = 1.0, glyphSet=None) -> None:
        """Initialize the pen.

        Args:
            bezier_steps: Straight segments per curve segment
            scale: Factor from font units to output units
            glyphSet: Glyph set used to draw composite glyph components

        Raises:
            ValueError: If bezier_steps is less than 1
        """
        super().__init__(glyphSet)
        if bezier_steps < 1:
            raise ValueError(f"bezier_steps must be at least 1, got {bezier_steps}")
        self.bezier_steps = bezier_steps
        self.scale = scale
        self.contours: list[Contour] = []
        self._current: list[Point] = []

    def _scaled(self, pt: tuple[float, float]) -> Point:
        return Point(pt[0] * self.scale, pt[1] * self.scale)

    def _append(self, point: Point) -> None:
        if not self._current or self._current[-1] != point:
            self._current.append(point)

    def _flush(self) -> None:
        points = self._current
        self._current = []

        # Closing point repeats the start
        while len(points) > 1 and points[-1] == points[0]:
            points.pop()

        if len(points) >= 3:
            self.contours.append(Contour.from_points(points))

    def _moveTo(self, pt):
        self._flush()
        self._current = [self._scaled(pt)]

    def _lineTo(self, pt):
        self._append(self._scaled(pt))

    def _qCurveToOne(self, pt1, pt2):
        start = self._current[-1]
        for point in flatten_quadratic([start, self._scaled(pt1), self._scaled(pt2)], self.bezier_steps):
            self._append(point)

    def _curveToOne(self, pt1, pt2, pt3):
        start = self._current[-1]
        control = [start, self._scaled(pt1), self._scaled(pt2), self._scaled(pt3)]
        for point in flatten_cubic(control, self.bezier_steps):
            self._append(point)

    def _closePath(self):
        self._flush()

    def _endPath(self):
        self._flush()
