"""Internal Bezier curve flattening algorithms.

Curves are approximated with a fixed number of straight segments per curve
rather than an error tolerance, so the triangle count of a glyph does not
depend on its size.
"""

from meshtype.domain import Point


def flatten_quadratic(points: list[Point], steps: int) -> list[Point]:
    """Flatten a quadratic Bezier curve into ``steps`` segments.

    Args:
        points: List of 3 control points [p0, p1, p2]
        steps: Number of straight segments

    Returns:
        Points on the curve at t = i/steps for i in 1..steps (p0 excluded)
    """
    p0, p1, p2 = points
    result: list[Point] = []

    for i in range(1, steps + 1):
        t = i / steps
        u = 1.0 - t
        # B(t) = u^2 p0 + 2ut p1 + t^2 p2
        x = u * u * p0.x + 2 * u * t * p1.x + t * t * p2.x
        y = u * u * p0.y + 2 * u * t * p1.y + t * t * p2.y
        result.append(Point(x, y))

    # Land exactly on the end point
    result[-1] = p2
    return result


def flatten_cubic(points: list[Point], steps: int) -> list[Point]:
    """Flatten a cubic Bezier curve into ``steps`` segments.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        steps: Number of straight segments

    Returns:
        Points on the curve at t = i/steps for i in 1..steps (p0 excluded)
    """
    p0, p1, p2, p3 = points
    result: list[Point] = []

    for i in range(1, steps + 1):
        t = i / steps
        u = 1.0 - t
        a = u * u * u
        b = 3 * u * u * t
        c = 3 * u * t * t
        d = t * t * t
        result.append(
            Point(
                a * p0.x + b * p1.x + c * p2.x + d * p3.x,
                a * p0.y + b * p1.y + c * p2.y + d * p3.y,
            )
        )

    result[-1] = p3
    return result
