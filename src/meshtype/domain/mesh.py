"""Triangle mesh container for extruded text.

TextMesh collects vertex positions and triangle index triples. It performs no
vertex welding: every face added with ``add_face`` gets three new vertices.
"""

from dataclasses import dataclass, field

import numpy as np

Vec3 = tuple[float, float, float]
Triangle3D = tuple[Vec3, Vec3, Vec3]


@dataclass
class TextMesh:
    """An indexed triangle mesh.

    Attributes:
        vertices: Vertex positions
        faces: Triangles as indices into ``vertices``
    """

    vertices: list[Vec3] = field(default_factory=list)
    faces: list[tuple[int, int, int]] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.faces)

    def is_empty(self) -> bool:
        """Check if the mesh has no triangles."""
        return len(self.faces) == 0

    def add_vertex(self, position: Vec3) -> int:
        """Append a vertex.

        Args:
            position: (x, y, z) position

        Returns:
            Index of the new vertex
        """
        x, y, z = position
        self.vertices.append((float(x), float(y), float(z)))
        return len(self.vertices) - 1

    def add_triangle(self, a: int, b: int, c: int) -> int:
        """Append a triangle over existing vertices.

        Args:
            a: Index of the first corner
            b: Index of the second corner
            c: Index of the third corner

        Returns:
            Index of the new triangle

        Raises:
            IndexError: If any index does not refer to an existing vertex
        """
        n = len(self.vertices)
        for index in (a, b, c):
            if not 0 <= index < n:
                raise IndexError(f"Vertex index {index} out of range (0..{n - 1})")
        self.faces.append((a, b, c))
        return len(self.faces) - 1

    def add_face(self, triangle: Triangle3D) -> int:
        """Append a triangle given by its three corner positions.

        Each corner becomes a new vertex.

        Args:
            triangle: Three (x, y, z) positions in winding order

        Returns:
            Index of the new triangle
        """
        a, b, c = (self.add_vertex(corner) for corner in triangle)
        return self.add_triangle(a, b, c)

    def triangles(self) -> list[Triangle3D]:
        """Get every triangle as three corner positions."""
        return [
            (self.vertices[a], self.vertices[b], self.vertices[c])
            for a, b, c in self.faces
        ]

    def vertex_array(self) -> np.ndarray:
        """Vertex positions as an (N, 3) float64 array."""
        return np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3)

    def face_array(self) -> np.ndarray:
        """Triangles as an (M, 3) int64 array."""
        return np.asarray(self.faces, dtype=np.int64).reshape(-1, 3)

    def bounds(self) -> tuple[Vec3, Vec3]:
        """Axis-aligned bounds of the mesh.

        Returns:
            Tuple of (min corner, max corner)

        Raises:
            ValueError: If the mesh has no vertices
        """
        if not self.vertices:
            raise ValueError("Empty mesh has no bounds")
        array = self.vertex_array()
        lo = array.min(axis=0)
        hi = array.max(axis=0)
        return (
            (float(lo[0]), float(lo[1]), float(lo[2])),
            (float(hi[0]), float(hi[1]), float(hi[2])),
        )
