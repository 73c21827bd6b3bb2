"""Cap tessellation: one tessellation unit per fill contour.

For every clockwise contour of a character, the contour is declared with the
NONZERO rule and each of its holes with the ODD rule, then the unit is
triangulated. The resulting triangles lie at z = 0 and are later copied to
both faces of the extrusion.
"""

from collections.abc import Callable

from meshtype.core.classifier import holes_of
from meshtype.core.tessellator import PolygonTessellator, Triangle2D, WindingRule
from meshtype.domain import CharacterOutline
from meshtype.exceptions import TessellationError

FailureHandler = Callable[[str, Exception], None]


def tessellate_character(
    outline: CharacterOutline,
    tessellator: PolygonTessellator,
    on_failure: FailureHandler | None = None,
) -> list[list[Triangle2D]]:
    """Triangulate the caps of one character.

    A character may yield no cap (only counter-clockwise contours), one cap,
    or several independent caps (the dot and stem of "i").

    Args:
        outline: Positioned contours of the character
        tessellator: Tessellator used for every unit
        on_failure: Called with (character, error) when a cap cannot be
            triangulated; the cap is then skipped. Errors propagate if None.

    Returns:
        One triangle list per fill contour that was tessellated
    """
    caps: list[list[Triangle2D]] = []

    for outer in outline.outer_contours():
        try:
            tessellator.begin_polygon()
            tessellator.add_contour(outer.points, WindingRule.NONZERO)
            for hole in holes_of(outer, outline.contours):
                tessellator.add_contour(hole.points, WindingRule.ODD)
            triangles = tessellator.end_polygon()
        except TessellationError as e:
            if on_failure is None:
                raise
            on_failure(outline.character, e)
            continue

        caps.append(triangles)

    return caps
