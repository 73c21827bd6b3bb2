"""Polygon tessellation for glyph caps.

A tessellation unit is opened with ``begin_polygon``, fed contours together
with the winding rule that decides how each contour contributes to the filled
region, and closed with ``end_polygon`` which returns the triangles.

Key classes:
- WindingRule: How a contour combines with the region built so far
- PolygonTessellator: Interface the cap driver talks to
- ShapelyTessellator: GEOS backed implementation
"""

from collections.abc import Sequence
from enum import Enum
from typing import Protocol

from shapely import constrained_delaunay_triangles, get_parts, make_valid
from shapely.errors import GEOSException
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from meshtype.core.geometry import triangle_signed_area
from meshtype.domain import Point
from meshtype.exceptions import TessellationError

Vec2 = tuple[float, float]
Triangle2D = tuple[Vec2, Vec2, Vec2]

# Triangles with a smaller absolute area are dropped
DEGENERATE_AREA = 1e-12


class WindingRule(str, Enum):
    """How a contour contributes to the region of a tessellation unit."""

    NONZERO = "nonzero"  # fills its interior
    ODD = "odd"  # toggles coverage of its interior


class PolygonTessellator(Protocol):
    """Turns contours with winding rules into planar triangles."""

    def begin_polygon(self) -> None:
        """Start a new tessellation unit."""
        ...

    def add_contour(self, points: Sequence[Point], rule: WindingRule) -> None:
        """Declare one closed contour of the current unit."""
        ...

    def end_polygon(self) -> list[Triangle2D]:
        """Finish the unit and return its triangles.

        Triangles are clockwise in the xy-plane, so their normal points
        towards -z.
        """
        ...


def _polygonal(geometry: BaseGeometry) -> BaseGeometry:
    """Repair a geometry and keep only its polygonal parts."""
    if not geometry.is_valid:
        geometry = make_valid(geometry)

    parts = [
        part for part in get_parts(geometry)
        if isinstance(part, (Polygon, MultiPolygon)) and not part.is_empty
    ]
    if not parts:
        return Polygon()
    return unary_union(parts)


class ShapelyTessellator:
    """Tessellator built on shapely polygon operations.

    NONZERO contours are unioned into the region and ODD contours are
    combined by symmetric difference, so a hole nested inside another hole
    fills again. The region is triangulated with GEOS constrained Delaunay
    triangulation, which keeps every contour edge.

    Example:
        tessellator = ShapelyTessellator()
        tessellator.begin_polygon()
        tessellator.add_contour(outer.points, WindingRule.NONZERO)
        tessellator.add_contour(hole.points, WindingRule.ODD)
        triangles = tessellator.end_polygon()
    """

    def __init__(self) -> None:
        self._contours: list[tuple[list[Vec2], WindingRule]] | None = None

    def begin_polygon(self) -> None:
        self._contours = []

    def add_contour(self, points: Sequence[Point], rule: WindingRule) -> None:
        if self._contours is None:
            raise TessellationError("add_contour() called outside begin_polygon()/end_polygon()")
        if len(points) < 3:
            raise TessellationError(f"Contour needs at least 3 points, got {len(points)}")
        self._contours.append(([p.to_tuple() for p in points], rule))

    def end_polygon(self) -> list[Triangle2D]:
        if self._contours is None:
            raise TessellationError("end_polygon() called without begin_polygon()")

        contours = self._contours
        self._contours = None

        try:
            region = self._build_region(contours)
            if region.is_empty:
                return []
            triangulation = constrained_delaunay_triangles(region)
        except GEOSException as e:
            raise TessellationError(f"Triangulation failed: {e}") from e

        triangles: list[Triangle2D] = []
        for triangle in get_parts(triangulation):
            if not isinstance(triangle, Polygon) or triangle.is_empty:
                continue
            a, b, c = (tuple(coord[:2]) for coord in list(triangle.exterior.coords)[:3])
            area = triangle_signed_area(a, b, c)
            if abs(area) < DEGENERATE_AREA:
                continue
            # Clockwise in the xy-plane
            if area > 0:
                b, c = c, b
            triangles.append((a, b, c))

        return triangles

    @staticmethod
    def _build_region(contours: list[tuple[list[Vec2], WindingRule]]) -> BaseGeometry:
        region: BaseGeometry = Polygon()

        for coords, rule in contours:
            shape = _polygonal(Polygon(coords))
            if shape.is_empty:
                continue
            if region.is_empty:
                region = shape
            elif rule is WindingRule.ODD:
                region = _polygonal(region.symmetric_difference(shape))
            else:
                region = _polygonal(region.union(shape))

        return region
