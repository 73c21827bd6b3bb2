"""Extrusion of character outlines into a closed triangle mesh.

Side walls join every contour edge at z = 0 to the same edge at z = depth.
Caps are the tessellated fill regions, emitted once at z = 0 facing down and
once at z = depth facing up. Vertices are never shared between triangles.
"""

from dataclasses import dataclass, field

from meshtype.core.caps import FailureHandler, tessellate_character
from meshtype.core.tessellator import PolygonTessellator, Triangle2D
from meshtype.domain import CharacterOutline, Contour, TextMesh, Triangle3D


@dataclass
class ExtrusionGeometry:
    """All triangles of an extruded text run, before they enter a mesh.

    Attributes:
        side_walls: Two triangles per contour edge
        caps: Bottom and top copies of every cap triangle
        cap_count: Number of tessellated fill regions
        contour_count: Number of contours that were extruded
    """

    side_walls: list[Triangle3D] = field(default_factory=list)
    caps: list[Triangle3D] = field(default_factory=list)
    cap_count: int = 0
    contour_count: int = 0

    @property
    def triangle_count(self) -> int:
        return len(self.side_walls) + len(self.caps)

    def write_to(self, mesh: TextMesh) -> None:
        """Append every triangle to ``mesh`` with its own three vertices."""
        for triangle in self.side_walls:
            mesh.add_face(triangle)
        for triangle in self.caps:
            mesh.add_face(triangle)


def side_wall_triangles(contour: Contour, depth: float) -> list[Triangle3D]:
    """Build the side wall of one contour.

    For each edge (a, b), including the closing edge, the quad between z = 0
    and z = depth is split into (a', b, a) and (a', b', b) where a' and b' are
    a and b lifted to z = depth. With fills clockwise and holes
    counter-clockwise, every normal points away from the solid.

    Args:
        contour: Contour at z = 0
        depth: Extrusion depth along +z

    Returns:
        Two triangles per edge
    """
    triangles: list[Triangle3D] = []
    points = contour.points
    n = len(points)

    for i in range(n):
        p, q = points[i], points[(i + 1) % n]
        a = (p.x, p.y, 0.0)
        b = (q.x, q.y, 0.0)
        a_top = (p.x, p.y, depth)
        b_top = (q.x, q.y, depth)
        triangles.append((a_top, b, a))
        triangles.append((a_top, b_top, b))

    return triangles


def cap_faces(triangle: Triangle2D, depth: float) -> tuple[Triangle3D, Triangle3D]:
    """Lift a clockwise cap triangle to its bottom and top faces.

    Args:
        triangle: Clockwise planar triangle (va, vb, vc)
        depth: Extrusion depth along +z

    Returns:
        Tuple of (bottom face at z = 0, top face at z = depth with reversed
        corner order)
    """
    va, vb, vc = triangle
    bottom = ((va[0], va[1], 0.0), (vb[0], vb[1], 0.0), (vc[0], vc[1], 0.0))
    top = ((vc[0], vc[1], depth), (vb[0], vb[1], depth), (va[0], va[1], depth))
    return bottom, top


def build_extrusion(
    characters: list[CharacterOutline],
    depth: float,
    tessellator: PolygonTessellator,
    on_failure: FailureHandler | None = None,
) -> ExtrusionGeometry:
    """Compute side walls and caps for a laid out text run.

    Args:
        characters: Character outlines in text order
        depth: Extrusion depth along +z
        tessellator: Tessellator for the caps
        on_failure: Per-cap failure handler, see ``tessellate_character``

    Returns:
        The triangles of the solid, not yet written to a mesh
    """
    geometry = ExtrusionGeometry()

    for outline in characters:
        for contour in outline.contours:
            geometry.side_walls.extend(side_wall_triangles(contour, depth))
            geometry.contour_count += 1

        for cap in tessellate_character(outline, tessellator, on_failure):
            geometry.cap_count += 1
            for triangle in cap:
                geometry.caps.extend(cap_faces(triangle, depth))

    return geometry


def extrude(
    characters: list[CharacterOutline],
    depth: float,
    tessellator: PolygonTessellator,
    mesh: TextMesh | None = None,
    on_failure: FailureHandler | None = None,
) -> TextMesh | None:
    """Extrude laid out characters into a triangle mesh.

    Args:
        characters: Character outlines in text order
        depth: Extrusion depth along +z
        tessellator: Tessellator for the caps
        mesh: Mesh to append to (a new one is created if None)
        on_failure: Per-cap failure handler, see ``tessellate_character``

    Returns:
        The mesh, or None if the characters have no contours at all. In that
        case ``mesh`` is left untouched.
    """
    if not any(outline.contours for outline in characters):
        return None

    geometry = build_extrusion(characters, depth, tessellator, on_failure)

    if mesh is None:
        mesh = TextMesh()
    geometry.write_to(mesh)
    return mesh
