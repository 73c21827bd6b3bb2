"""Font and mesh I/O layer for meshtype.

This module handles reading glyph outlines from font files using fonttools
and writing generated meshes using trimesh. It provides a clean abstraction
layer between those libraries and the domain models.

Key responsibilities:
- Load TTF/OTF fonts at a nominal size
- Flatten glyph outlines into polygonal contours
- Serve advances and kerning in output units
- Export meshes (STL, OBJ, PLY, OFF, GLB)

Key classes:
- FontOutlineSource: Glyph outlines from a font file
- FlatteningPen: fontTools pen producing flattened contours
- MeshWriter: Save generated meshes
"""

from meshtype.io.pens import FlatteningPen
from meshtype.io.source import FontOutlineSource
from meshtype.io.writer import MeshWriter

__all__ = [
    "FlatteningPen",
    "FontOutlineSource",
    "MeshWriter",
]
