"""Mesh writer for saving generated text meshes.

This module provides the MeshWriter class, which exports a TextMesh through
trimesh in any of the supported mesh formats.
"""

import re
from pathlib import Path

import trimesh

from meshtype.config import MeshFormat
from meshtype.domain import TextMesh
from meshtype.exceptions import MeshExportError

# Longest text fragment used in a generated file name
MAX_NAME_TEXT = 24


class MeshWriter:
    """Writes text meshes to disk.

    Vertices are written as generated; no welding or repair is applied.

    Example:
        MeshWriter.write(mesh, Path("hello.stl"))
    """

    @staticmethod
    def to_trimesh(mesh: TextMesh) -> trimesh.Trimesh:
        """Wrap a TextMesh in a trimesh object without processing it.

        Args:
            mesh: Mesh to convert

        Returns:
            trimesh.Trimesh sharing the same vertex order and faces
        """
        return trimesh.Trimesh(
            vertices=mesh.vertex_array(),
            faces=mesh.face_array(),
            process=False,
        )

    @staticmethod
    def resolve_format(path: Path, file_type: MeshFormat | str | None = None) -> MeshFormat:
        """Work out the output format from an explicit type or the file suffix.

        Args:
            path: Output path
            file_type: Explicit format, overrides the suffix

        Returns:
            Output format

        Raises:
            MeshExportError: If the format is not supported
        """
        name = file_type.value if isinstance(file_type, MeshFormat) else file_type
        if name is None:
            name = path.suffix.lstrip(".")

        try:
            return MeshFormat(name.lower())
        except ValueError:
            supported = ", ".join(f.value for f in MeshFormat)
            raise MeshExportError(
                str(path), f"unsupported format '{name}' (supported: {supported})"
            ) from None

    @classmethod
    def write(
        cls, mesh: TextMesh, path: Path, file_type: MeshFormat | str | None = None
    ) -> Path:
        """Export a mesh.

        Args:
            mesh: Mesh to write
            path: Output path
            file_type: Output format (taken from the suffix if None)

        Returns:
            The path written

        Raises:
            MeshExportError: If the mesh is empty, the format is unsupported
                or the file cannot be written
        """
        if mesh.is_empty():
            raise MeshExportError(str(path), "mesh has no triangles")

        mesh_format = cls.resolve_format(path, file_type)

        try:
            cls.to_trimesh(mesh).export(str(path), file_type=mesh_format.value)
        except (OSError, ValueError) as e:
            raise MeshExportError(str(path), str(e)) from e

        return path

    @staticmethod
    def default_output_path(
        font_path: Path, text: str, file_type: MeshFormat = MeshFormat.STL
    ) -> Path:
        """Generate an output path next to the font.

        Converts: Roboto-Regular.ttf + "Hello" -> Roboto-Regular-Hello.stl

        Args:
            font_path: Font the mesh was generated from
            text: Text that was meshed
            file_type: Output format

        Returns:
            Path in the font's directory
        """
        slug = re.sub(r"[^A-Za-z0-9]+", "_", text).strip("_")[:MAX_NAME_TEXT] or "text"
        return font_path.parent / f"{font_path.stem}-{slug}.{file_type.value}"
