"""Contour classification: fills, holes and winding validation.

Outer (fill) contours wind clockwise and holes wind counter-clockwise. A hole
belongs to an outer contour of the same character when it winds the other
way and lies entirely inside it. Nesting is found with a plain
O(contours^2 x points) containment scan; glyphs rarely have more than a
handful of contours.
"""

from meshtype.core.geometry import point_in_polygon
from meshtype.domain import Contour


def encloses(outer: Contour, inner: Contour) -> bool:
    """Check whether every point of ``inner`` lies inside ``outer``.

    Points on the boundary of ``outer`` count as inside. A contour never
    encloses one of equal or larger area, so duplicated contours do not
    enclose each other.
    """
    if abs(inner.signed_area()) >= abs(outer.signed_area()):
        return False
    return all(point_in_polygon(p, outer.points, inclusive=True) for p in inner.points)


def is_hole_of(candidate: Contour, outer: Contour) -> bool:
    """Check whether ``candidate`` is a hole of ``outer``.

    Points on the boundary of ``outer`` count as inside, so holes that touch
    the outer contour after curve flattening are still accepted.

    Args:
        candidate: Contour that may be a hole
        outer: Fill contour of the same character

    Returns:
        True if candidate is not outer, winds the opposite way and all of its
        points lie inside outer
    """
    if candidate is outer:
        return False
    if candidate.clockwise == outer.clockwise:
        return False
    return encloses(outer, candidate)


def holes_of(outer: Contour, contours: list[Contour]) -> list[Contour]:
    """Get the holes of ``outer`` among ``contours``, in their original order."""
    return [candidate for candidate in contours if is_hole_of(candidate, outer)]


def nesting_depth(index: int, contours: list[Contour]) -> int:
    """Count how many other contours enclose contour ``index``.

    A contour is enclosed by another only if all of its points lie inside it
    (boundary included); partly overlapping fills do not nest.

    Args:
        index: Index of the contour to inspect
        contours: All contours of one character

    Returns:
        Number of enclosing contours (0 for a top-level contour)
    """
    contour = contours[index]
    return sum(
        1
        for j, other in enumerate(contours)
        if j != index and encloses(other, contour)
    )


def orient_contours(contours: list[Contour]) -> tuple[list[Contour], int]:
    """Make winding agree with nesting depth.

    Contours at even depth must be clockwise (fills), contours at odd depth
    counter-clockwise (holes). A contour whose point order or ``clockwise``
    flag disagrees is corrected.

    Args:
        contours: Contours of one character

    Returns:
        Tuple of (oriented contours in the same order, number corrected)
    """
    oriented: list[Contour] = []
    corrected = 0

    for index, contour in enumerate(contours):
        expected_cw = nesting_depth(index, contours) % 2 == 0
        actual_cw = contour.signed_area() < 0

        if actual_cw == expected_cw and contour.clockwise == expected_cw:
            oriented.append(contour)
            continue

        points = contour.points if actual_cw == expected_cw else list(reversed(contour.points))
        oriented.append(Contour(points=points, clockwise=expected_cw))
        corrected += 1

    return oriented, corrected
