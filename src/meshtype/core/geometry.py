"""Geometric operations for contour classification and extrusion.

This module provides core mathematical utilities for:
- Triangle signed area (shoelace formula)
- Point-in-polygon testing (ray casting algorithm, boundary aware)
- Point-on-segment testing
- Triangle normals

All functions are pure and stateless.
"""

import math

from meshtype.domain import Point

# Tolerance for treating a point as lying on a polygon edge
BOUNDARY_EPSILON = 1e-9


def point_on_segment(
    point: Point, seg_start: Point, seg_end: Point, epsilon: float = BOUNDARY_EPSILON
) -> bool:
    """Check whether a point lies on a line segment.

    Args:
        point: The point to test
        seg_start: Start point of the segment
        seg_end: End point of the segment
        epsilon: Distance tolerance, scaled by the segment length

    Returns:
        True if the point is on the segment within tolerance
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    length = math.hypot(dx, dy)

    if length < epsilon:
        return math.hypot(point.x - seg_start.x, point.y - seg_start.y) <= epsilon

    cross = (point.x - seg_start.x) * dy - (point.y - seg_start.y) * dx
    if abs(cross) > epsilon * max(1.0, length):
        return False

    dot = (point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy
    return -epsilon <= dot <= length * length + epsilon


def point_in_polygon(point: Point, polygon: list[Point], inclusive: bool = False) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.
    Works for non-convex polygons.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary
        inclusive: If True, points on the boundary count as inside

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)  # Center
        True
        >>> point_in_polygon(Point(2.0, 1.0), square, inclusive=True)  # On edge
        True
    """
    n = len(polygon)
    if n < 3:
        return False

    if inclusive:
        for i in range(n):
            if point_on_segment(point, polygon[i], polygon[(i + 1) % n]):
                return True

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def triangle_signed_area(
    a: tuple[float, float], b: tuple[float, float], c: tuple[float, float]
) -> float:
    """Signed area of a planar triangle (positive when counter-clockwise)."""
    return 0.5 * ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


def triangle_normal(
    a: tuple[float, float, float],
    b: tuple[float, float, float],
    c: tuple[float, float, float],
) -> tuple[float, float, float]:
    """Calculate the (unnormalized) normal of a 3D triangle.

    The normal follows the right-hand rule over the corner order a, b, c.

    Args:
        a: First corner
        b: Second corner
        c: Third corner

    Returns:
        Cross product (b - a) x (c - a)
    """
    ux, uy, uz = b[0] - a[0], b[1] - a[1], b[2] - a[2]
    vx, vy, vz = c[0] - a[0], c[1] - a[1], c[2] - a[2]
    return (uy * vz - uz * vy, uz * vx - ux * vz, ux * vy - uy * vx)
