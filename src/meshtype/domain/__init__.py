"""Domain models for meshtype.

This module contains the core domain models representing glyph outlines,
text layout state and the output mesh. All models are designed to be:

- Plain dataclasses (immutable where they are passed between stages)
- Independent of fonttools and shapely implementation details

Key classes:
- Point: A 2D point
- Contour: A closed polygonal loop with its winding direction
- GlyphOutline: What an outline source reports for one glyph
- CharacterOutline: Positioned contours of one character
- LayoutState: Pen state carried between characters
- TextMesh: Output triangle mesh
"""

from meshtype.domain.contour import Contour, Point
from meshtype.domain.mesh import TextMesh, Triangle3D, Vec3
from meshtype.domain.outline import CharacterOutline, GlyphOutline, LayoutState

__all__: list[str] = [
    # Planar types
    "Point",
    "Contour",
    # Outlines
    "GlyphOutline",
    "CharacterOutline",
    "LayoutState",
    # Mesh
    "TextMesh",
    "Triangle3D",
    "Vec3",
]
