"""Glyph outlines and text layout state.

This module defines what the outline source reports for one glyph, what the
layout engine produces for one character, and the pen state carried from
one character to the next.
"""

from dataclasses import dataclass, field

from meshtype.domain.contour import Contour


@dataclass
class GlyphOutline:
    """Outline of a single glyph as reported by an outline source.

    Contours are relative to the glyph origin, already flattened to straight
    segments and scaled to output units.

    Attributes:
        glyph_index: Glyph identity in the font (0 is the missing glyph)
        contours: Flattened contours, in font order
        advance: Horizontal advance in output units
        lsb_delta: Left side bearing delta in 26.6 fixed point
        rsb_delta: Right side bearing delta in 26.6 fixed point
    """

    glyph_index: int
    contours: list[Contour]
    advance: float
    lsb_delta: int = 0
    rsb_delta: int = 0


@dataclass
class CharacterOutline:
    """Positioned contours of one character of a text run.

    Attributes:
        character: The character this outline was built for
        contours: Contours offset to the pen position, in discovery order
        glyph_index: Glyph the character resolved to (None on failure)
    """

    character: str
    contours: list[Contour] = field(default_factory=list)
    glyph_index: int | None = None

    def is_empty(self) -> bool:
        """Check if the character produced no geometry.

        Spaces, unmapped characters and glyphs that failed to load are empty.

        Returns:
            True if there are no contours, False otherwise
        """
        return len(self.contours) == 0

    def outer_contours(self) -> list[Contour]:
        """Get the fill contours (clockwise winding)."""
        return [contour for contour in self.contours if contour.clockwise]


@dataclass(frozen=True)
class LayoutState:
    """Pen state threaded through the characters of one text run.

    A new state is created at the start of every layout and never shared
    between runs.

    Attributes:
        pen_x: Current pen x in output units
        pen_y: Current pen y (baseline) in output units
        previous_glyph: Glyph index of the previous laid out character, 0 if none
        previous_rsb_delta: Right side bearing delta of the previous glyph
    """

    pen_x: float = 0.0
    pen_y: float = 0.0
    previous_glyph: int = 0
    previous_rsb_delta: int = 0

    @classmethod
    def start(cls, x: float, y: float) -> "LayoutState":
        """Create the state for the first character of a run."""
        return cls(pen_x=x, pen_y=y)
