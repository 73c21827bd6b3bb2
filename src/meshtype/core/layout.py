"""Text layout: glyph placement along the baseline.

OutlineProvider wraps an outline source and places one character at a time,
applying kerning, the side-bearing delta correction and the glyph advance.
layout_text runs it over a whole string, threading an explicit LayoutState
from one character to the next.
"""

from collections.abc import Callable
from typing import Protocol

from meshtype.core.classifier import orient_contours
from meshtype.domain import CharacterOutline, GlyphOutline, LayoutState
from meshtype.exceptions import GlyphError

# Side-bearing deltas are 26.6 fixed point; half a pixel
HINTING_DELTA_THRESHOLD = 32


class OutlineSource(Protocol):
    """Glyph rasterizer seen by the layout engine."""

    @property
    def has_kerning(self) -> bool:
        """True if the font carries glyph-pair kerning."""
        ...

    def glyph_index(self, character: str) -> int:
        """Resolve a character to a glyph identity (raises GlyphError)."""
        ...

    def load_glyph(self, glyph_index: int) -> GlyphOutline:
        """Load a flattened glyph outline (raises GlyphError)."""
        ...

    def kerning(self, left: int, right: int) -> float:
        """Horizontal kerning between two glyphs in output units."""
        ...


def hinting_correction(previous_rsb_delta: int, lsb_delta: int) -> float:
    """Pen x correction for sub-pixel drift between two glyphs.

    Args:
        previous_rsb_delta: Right side bearing delta of the previous glyph
        lsb_delta: Left side bearing delta of the current glyph

    Returns:
        -1.0, 0.0 or +1.0 output unit
    """
    delta = previous_rsb_delta - lsb_delta
    if delta >= HINTING_DELTA_THRESHOLD:
        return -1.0
    if delta < -HINTING_DELTA_THRESHOLD:
        return 1.0
    return 0.0


class OutlineProvider:
    """Places glyph outlines of single characters at the pen position.

    The provider holds no pen state of its own; every call takes the
    current LayoutState and returns the next one.

    Per-glyph errors never escape: the character gets an empty outline, the
    state is returned unchanged and ``on_failure`` is told about it.
    """

    def __init__(
        self,
        source: OutlineSource,
        on_failure: Callable[[str, Exception], None] | None = None,
        on_character: Callable[[str, int, int], None] | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            source: Outline source for the current font
            on_failure: Called with (character, error) for a skipped glyph
            on_character: Called with (character, contour count, windings
                corrected) for every placed glyph
        """
        self._source = source
        self._on_failure = on_failure
        self._on_character = on_character

    def next_character_outline(
        self, character: str, state: LayoutState
    ) -> tuple[CharacterOutline, LayoutState]:
        """Place one character.

        Args:
            character: The character to place
            state: Pen state before this character

        Returns:
            Tuple of (positioned outline, pen state after this character)
        """
        try:
            glyph_index = self._source.glyph_index(character)
            glyph = self._source.load_glyph(glyph_index)
        except GlyphError as e:
            if self._on_failure is not None:
                self._on_failure(character, e)
            return CharacterOutline(character=character), state

        pen_x = state.pen_x
        if state.previous_glyph and self._source.has_kerning:
            pen_x += self._source.kerning(state.previous_glyph, glyph_index)

        pen_x += hinting_correction(state.previous_rsb_delta, glyph.lsb_delta)

        contours, corrected = orient_contours(glyph.contours)
        placed = [contour.translated(pen_x, state.pen_y) for contour in contours]

        if self._on_character is not None:
            self._on_character(character, len(placed), corrected)

        next_state = LayoutState(
            pen_x=pen_x + glyph.advance,
            pen_y=state.pen_y,
            previous_glyph=glyph_index,
            previous_rsb_delta=glyph.rsb_delta,
        )
        outline = CharacterOutline(character=character, contours=placed, glyph_index=glyph_index)
        return outline, next_state


def layout_text(
    provider: OutlineProvider, text: str, start_x: float, start_y: float
) -> tuple[list[CharacterOutline], LayoutState]:
    """Lay out a string one character at a time.

    Characters are processed strictly in order; kerning and advances depend
    on the previous character.

    Args:
        provider: Provider for the current font
        text: Text to lay out
        start_x: Pen x of the first character
        start_y: Baseline y

    Returns:
        Tuple of (one outline per character, final pen state)
    """
    state = LayoutState.start(start_x, start_y)
    outlines: list[CharacterOutline] = []

    for character in text:
        outline, state = provider.next_character_outline(character, state)
        outlines.append(outline)

    return outlines, state
