"""Core algorithms for meshtype.

This module contains the core algorithms for:

- Geometry operations (signed area, point-in-polygon, triangle normals)
- Text layout (kerning, side-bearing correction, pen advance)
- Contour classification (fills, holes, winding validation)
- Cap tessellation (one tessellation unit per fill contour)
- Extrusion (side walls and caps)

Key functions:
- layout_text: Lay out a string with an OutlineProvider
- is_hole_of / holes_of: Hole detection for a fill contour
- orient_contours: Make winding agree with nesting depth
- tessellate_character: Triangulate the caps of one character
- extrude: Build a TextMesh from laid out characters

Key classes:
- OutlineProvider: Places one character at the pen position
- ShapelyTessellator: Polygon tessellator with winding rules
- TextMesher: Text to mesh pipeline over a font
"""

from meshtype.core.caps import tessellate_character
from meshtype.core.classifier import (
    encloses,
    holes_of,
    is_hole_of,
    nesting_depth,
    orient_contours,
)
from meshtype.core.extrusion import (
    ExtrusionGeometry,
    build_extrusion,
    cap_faces,
    extrude,
    side_wall_triangles,
)
from meshtype.core.geometry import (
    point_in_polygon,
    point_on_segment,
    triangle_normal,
    triangle_signed_area,
)
from meshtype.core.layout import (
    OutlineProvider,
    OutlineSource,
    hinting_correction,
    layout_text,
)
from meshtype.core.mesher import TextMesher
from meshtype.core.tessellator import (
    PolygonTessellator,
    ShapelyTessellator,
    Triangle2D,
    WindingRule,
)

__all__ = [
    # Geometry functions
    "point_in_polygon",
    "point_on_segment",
    "triangle_normal",
    "triangle_signed_area",
    # Layout
    "OutlineProvider",
    "OutlineSource",
    "hinting_correction",
    "layout_text",
    # Classification
    "encloses",
    "holes_of",
    "is_hole_of",
    "nesting_depth",
    "orient_contours",
    # Tessellation
    "PolygonTessellator",
    "ShapelyTessellator",
    "Triangle2D",
    "WindingRule",
    "tessellate_character",
    # Extrusion
    "ExtrusionGeometry",
    "build_extrusion",
    "cap_faces",
    "extrude",
    "side_wall_triangles",
    # Pipeline
    "TextMesher",
]
