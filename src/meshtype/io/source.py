"""Glyph outline source backed by fontTools.

This module provides the FontOutlineSource class, which opens a TrueType or
OpenType font and serves flattened glyph outlines, advances and kerning in
output units.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from meshtype.domain import GlyphOutline
from meshtype.exceptions import (
    FontLoadError,
    FontSizeError,
    GlyphLoadError,
    GlyphNotFoundError,
    GlyphOutlineError,
)
from meshtype.io.pens import FlatteningPen

# The resolution in dpi
RESOLUTION = 96

# Points per inch, converts the nominal size in points to pixels
POINTS_PER_INCH = 72

# OpenType kern coverage: bit 0 horizontal, bit 1 minimum values, bit 2 cross-stream
OPENTYPE_HORIZONTAL = 0x01
OPENTYPE_EXCLUDED = 0x02 | 0x04

# Apple kern coverage: 0x80 vertical, 0x40 cross-stream, 0x20 variation
APPLE_EXCLUDED = 0x80 | 0x40 | 0x20


def _is_horizontal_kerning(subtable) -> bool:
    """Check whether a kern subtable holds plain horizontal pair values."""
    coverage = getattr(subtable, "coverage", OPENTYPE_HORIZONTAL)
    if getattr(subtable, "apple", False):
        return not coverage & APPLE_EXCLUDED
    return bool(coverage & OPENTYPE_HORIZONTAL) and not coverage & OPENTYPE_EXCLUDED


def _read_kerning(font: TTFont) -> dict[tuple[str, str], int]:
    """Collect horizontal glyph-pair kerning from the 'kern' table.

    Only format 0 subtables with plain horizontal values are read; vertical,
    cross-stream, minimum and variation subtables are skipped. Later
    subtables override earlier ones.

    Args:
        font: The TTFont object

    Returns:
        Mapping of (left glyph name, right glyph name) to kerning in font units
    """
    if "kern" not in font:
        return {}

    pairs: dict[tuple[str, str], int] = {}
    for subtable in getattr(font["kern"], "kernTables", []):
        table = getattr(subtable, "kernTable", None)
        if table is None:
            continue
        if not _is_horizontal_kerning(subtable):
            continue
        pairs.update(table)

    return pairs


class FontOutlineSource:
    """Serves flattened glyph outlines from a TTF/OTF font.

    Coordinates are returned in pixels at the nominal size: ``font_height``
    points rendered at 96 dpi. Outlines are unhinted, so side-bearing
    deltas are always zero.

    Example:
        source = FontOutlineSource(Path("font.ttf"), font_height=48)
        source.load()
        index = source.glyph_index("A")
        outline = source.load_glyph(index)
    """

    def __init__(self, font_path: Path, font_height: int, bezier_steps: int = 4) -> None:
        """Initialize the outline source.

        Args:
            font_path: Path to the TTF or OTF font file
            font_height: Nominal size in points
            bezier_steps: Straight segments per curve segment
        """
        self._font_path = Path(font_path)
        self._font_height = font_height
        self._bezier_steps = bezier_steps
        self._font: TTFont | None = None
        self._glyph_set = None
        self._cmap: dict[int, str] = {}
        self._kerning: dict[tuple[str, str], int] = {}
        self._is_cff = False
        self._scale = 0.0

    def load(self) -> None:
        """Open the font and set the nominal size.

        Raises:
            FontSizeError: If the nominal size is not positive
            FontLoadError: If the font file is missing, invalid or has no
                Unicode character map
        """
        self.close()

        if self._font_height <= 0:
            raise FontSizeError(self._font_height)

        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            font = TTFont(str(self._font_path), fontNumber=0)
            units_per_em = font["head"].unitsPerEm  # type: ignore[attr-defined]
            cmap = font.getBestCmap()
            glyph_set = font.getGlyphSet()
            kerning = _read_kerning(font)
            is_cff = "CFF " in font or "CFF2" in font
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        if not cmap:
            font.close()
            raise FontLoadError(str(self._font_path), "no Unicode character map")

        self._font = font
        self._glyph_set = glyph_set
        self._cmap = cmap
        self._kerning = kerning
        self._is_cff = is_cff
        self._scale = self._font_height * RESOLUTION / POINTS_PER_INCH / units_per_em

    @property
    def ready(self) -> bool:
        return self._font is not None

    @property
    def font_path(self) -> Path:
        return self._font_path

    @property
    def scale(self) -> float:
        """Factor from font units to output units."""
        return self._scale

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def bezier_steps(self) -> int:
        return self._bezier_steps

    @bezier_steps.setter
    def bezier_steps(self, steps: int) -> None:
        if steps < 1:
            raise ValueError(f"bezier_steps must be at least 1, got {steps}")
        self._bezier_steps = steps

    @property
    def has_kerning(self) -> bool:
        return bool(self._kerning)

    def glyph_index(self, character: str) -> int:
        """Resolve a character to its glyph ID.

        Args:
            character: Single character

        Returns:
            Glyph ID in the font

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the character is not mapped
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        glyph_name = self._cmap.get(ord(character))
        if glyph_name is None:
            raise GlyphNotFoundError(character)

        return self._font.getGlyphID(glyph_name)

    def load_glyph(self, glyph_index: int) -> GlyphOutline:
        """Load and flatten one glyph.

        Args:
            glyph_index: Glyph ID

        Returns:
            Outline relative to the glyph origin, in output units

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphLoadError: If the glyph ID does not exist
            GlyphOutlineError: If the outline cannot be drawn
        """
        if self._font is None or self._glyph_set is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        glyph_order = self._font.getGlyphOrder()
        if not 0 <= glyph_index < len(glyph_order):
            raise GlyphLoadError(glyph_index, "glyph index out of range")

        glyph_name = glyph_order[glyph_index]
        if glyph_name not in self._glyph_set:
            raise GlyphLoadError(glyph_index, f"glyph '{glyph_name}' missing from glyph set")

        pen = FlatteningPen(self._bezier_steps, self._scale, glyphSet=self._glyph_set)
        try:
            self._glyph_set[glyph_name].draw(pen)
        except Exception as e:
            raise GlyphOutlineError(glyph_name, str(e)) from e

        contours = pen.contours

        # CFF fonts use opposite winding convention from TrueType.
        # Reverse contour points to normalize to TrueType convention.
        if self._is_cff:
            contours = [contour.reversed() for contour in contours]

        advance_width, _ = self._font["hmtx"].metrics.get(glyph_name, (0, 0))  # type: ignore[attr-defined]

        return GlyphOutline(
            glyph_index=glyph_index,
            contours=contours,
            advance=advance_width * self._scale,
        )

    def kerning(self, left: int, right: int) -> float:
        """Horizontal kerning between two glyphs in output units.

        Args:
            left: Glyph ID of the left glyph
            right: Glyph ID of the right glyph

        Returns:
            Kerning offset, 0.0 if the pair is not kerned
        """
        if self._font is None or not self._kerning:
            return 0.0

        pair = (self._font.getGlyphName(left), self._font.getGlyphName(right))
        return self._kerning.get(pair, 0) * self._scale

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
        self._glyph_set = None
        self._cmap = {}
        self._kerning = {}

    def __enter__(self) -> "FontOutlineSource":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
