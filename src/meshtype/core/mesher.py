"""Text to extruded mesh pipeline.

TextMesher owns one outline source (an open font) and one tessellator and
turns text into a closed triangle mesh:

1. Lay out the characters along the baseline (kerning, hinting correction)
2. Tessellate the fill regions of every character, respecting holes
3. Extrude side walls and caps into a TextMesh

A TextMesher is not safe for concurrent use; give each thread its own.
"""

import time
from pathlib import Path

from meshtype.config import MeshTypeSettings
from meshtype.core.extrusion import build_extrusion
from meshtype.core.layout import OutlineProvider, OutlineSource, layout_text
from meshtype.core.tessellator import PolygonTessellator, ShapelyTessellator
from meshtype.domain import CharacterOutline, TextMesh
from meshtype.exceptions import FontError
from meshtype.io.source import FontOutlineSource
from meshtype.utils import MeshingLogger, MeshingStats

DEFAULT_FONT_HEIGHT = 48
DEFAULT_BEZIER_STEPS = 4
DEFAULT_DEPTH = 10.0


class TextMesher:
    """Generates extruded 3D text meshes from a font.

    A mesher is ready once a font has been opened (or an outline source has
    been injected). Generating on a mesher that is not ready fails softly by
    returning None.

    Example:
        with TextMesher("Roboto-Regular.ttf", font_height=48) as mesher:
            mesh = mesher.generate("Hello", x=0.0, y=0.0, extrude=10.0)
            if mesh is not None:
                print(mesh.triangle_count)
    """

    def __init__(
        self,
        font_path: Path | str | None = None,
        font_height: int = DEFAULT_FONT_HEIGHT,
        bezier_steps: int = DEFAULT_BEZIER_STEPS,
        *,
        source: OutlineSource | None = None,
        tessellator: PolygonTessellator | None = None,
        logger: MeshingLogger | None = None,
    ) -> None:
        """Initialize the mesher.

        Args:
            font_path: TTF/OTF font to open (ignored if ``source`` is given)
            font_height: Nominal font size in points, rendered at 96 dpi
            bezier_steps: Straight segments per curve segment
            source: Outline source to use instead of opening ``font_path``
            tessellator: Cap tessellator (ShapelyTessellator by default)
            logger: Meshing logger (one is created if None)

        Raises:
            ValueError: If bezier_steps is less than 1
        """
        if bezier_steps < 1:
            raise ValueError(f"bezier_steps must be at least 1, got {bezier_steps}")

        self._source: OutlineSource | None = None
        self._ready = False
        self._bezier_steps = bezier_steps
        self._tessellator: PolygonTessellator = (
            tessellator if tessellator is not None else ShapelyTessellator()
        )
        self._log = logger if logger is not None else MeshingLogger()

        if source is not None:
            self._source = source
            self._ready = True
        elif font_path is not None:
            self.set_font(font_path, font_height)

    @classmethod
    def from_settings(cls, font_path: Path | str, settings: MeshTypeSettings) -> "TextMesher":
        """Create a mesher from application settings."""
        return cls(
            font_path,
            font_height=settings.outline.font_height,
            bezier_steps=settings.outline.bezier_steps,
        )

    @property
    def ready(self) -> bool:
        """True if a font is loaded and generate can succeed."""
        return self._ready

    @property
    def bezier_steps(self) -> int:
        return self._bezier_steps

    @bezier_steps.setter
    def bezier_steps(self, steps: int) -> None:
        if steps < 1:
            raise ValueError(f"bezier_steps must be at least 1, got {steps}")
        self._bezier_steps = steps
        if self._source is not None and hasattr(self._source, "bezier_steps"):
            self._source.bezier_steps = steps  # type: ignore[attr-defined]

    @property
    def last_stats(self) -> MeshingStats:
        """Statistics of the most recent layout or generate call."""
        return self._log.stats

    def set_font(self, font_path: Path | str, font_height: int) -> bool:
        """Switch to another font, releasing the current one first.

        Args:
            font_path: TTF/OTF font to open
            font_height: Nominal font size in points

        Returns:
            True if the font was opened and the mesher is ready
        """
        self.close()

        source = FontOutlineSource(Path(font_path), font_height, self._bezier_steps)
        try:
            source.load()
        except FontError as e:
            self._log.logger.error(
                "Font not loaded",
                font=str(font_path),
                font_height=font_height,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        self._source = source
        self._ready = True
        self._log.logger.debug("Font loaded", font=str(font_path), font_height=font_height)
        return True

    def layout(self, text: str, x: float = 0.0, y: float = 0.0) -> list[CharacterOutline]:
        """Lay out text without extruding it.

        Args:
            text: Text to lay out
            x: Pen x of the first character
            y: Baseline y

        Returns:
            One outline per character, or an empty list if not ready
        """
        self._log.start_run(text)
        return self._layout(text, x, y)

    def generate(
        self, text: str, x: float = 0.0, y: float = 0.0, extrude: float = DEFAULT_DEPTH
    ) -> TextMesh | None:
        """Generate an extruded mesh of the text.

        Args:
            text: Text to mesh
            x: Pen x of the first character
            y: Baseline y
            extrude: Extrusion depth along +z

        Returns:
            A new mesh, or None if the mesher is not ready or the text
            produced no contours
        """
        if not self._ready:
            self._log.start_run(text)
            self._log.log_run_failed("font not loaded")
            return None

        mesh = TextMesh()
        if self.generate_into(mesh, text, x, y, extrude):
            return mesh
        return None

    def generate_into(
        self,
        mesh: TextMesh,
        text: str,
        x: float = 0.0,
        y: float = 0.0,
        extrude: float = DEFAULT_DEPTH,
    ) -> bool:
        """Generate an extruded mesh of the text into an existing mesh.

        Triangles are appended to ``mesh``. On failure the mesh is left
        untouched.

        Args:
            mesh: Mesh to append to
            text: Text to mesh
            x: Pen x of the first character
            y: Baseline y
            extrude: Extrusion depth along +z

        Returns:
            True if geometry was written, False otherwise
        """
        self._log.start_run(text, start_time=time.perf_counter())

        if not self._ready:
            self._log.log_run_failed("font not loaded", end_time=time.perf_counter())
            return False

        characters = self._layout(text, x, y)
        if not any(outline.contours for outline in characters):
            self._log.log_run_failed(
                "no contour generated from the text using the specified font",
                end_time=time.perf_counter(),
            )
            return False

        geometry = build_extrusion(
            characters,
            extrude,
            self._tessellator,
            on_failure=self._log.log_cap_failure,
        )
        geometry.write_to(mesh)

        self._log.log_run_complete(
            caps=geometry.cap_count,
            triangles=geometry.triangle_count,
            end_time=time.perf_counter(),
        )
        return True

    def _layout(self, text: str, x: float, y: float) -> list[CharacterOutline]:
        if not self._ready or self._source is None:
            return []

        provider = OutlineProvider(
            self._source,
            on_failure=self._log.log_glyph_failure,
            on_character=self._log.log_character,
        )
        outlines, _ = layout_text(provider, text, x, y)
        return outlines

    def close(self) -> None:
        """Release the font. Safe to call more than once."""
        source = getattr(self, "_source", None)
        if source is not None and hasattr(source, "close"):
            source.close()
        self._source = None
        self._ready = False

    def __enter__(self) -> "TextMesher":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

    def __del__(self) -> None:
        self.close()
