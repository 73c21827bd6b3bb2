"""Shared fixtures: a generated test font and an in-memory outline source."""

from collections.abc import Callable
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from meshtype.domain import Contour, GlyphOutline, Point
from meshtype.exceptions import GlyphLoadError, GlyphNotFoundError

UNITS_PER_EM = 1000

# 75 pt at 96 dpi is 100 pixels per em, so one font unit is 0.1 output units
TEST_FONT_HEIGHT = 75
TEST_SCALE = 0.1

ADVANCES = {
    ".notdef": 500,
    "space": 250,
    "A": 500,
    "V": 500,
    "I": 500,
    "O": 600,
    "D": 600,
    "i": 300,
    "X": 500,
}

KERNING = {("A", "V"): -80}


def _rectangle(pen, x0: int, y0: int, x1: int, y1: int, clockwise: bool = True) -> None:
    if clockwise:
        points = [(x0, y0), (x0, y1), (x1, y1), (x1, y0)]
    else:
        points = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
    pen.moveTo(points[0])
    for point in points[1:]:
        pen.lineTo(point)
    pen.closePath()


def _draw(name: str, pen) -> None:
    if name == ".notdef":
        _rectangle(pen, 50, 0, 450, 700)
    elif name == "A":
        pen.moveTo((0, 0))
        pen.lineTo((250, 700))
        pen.lineTo((500, 0))
        pen.closePath()
    elif name == "V":
        pen.moveTo((0, 700))
        pen.lineTo((500, 700))
        pen.lineTo((250, 0))
        pen.closePath()
    elif name == "I":
        _rectangle(pen, 100, 0, 400, 700)
    elif name == "O":
        _rectangle(pen, 50, 0, 550, 700)
        _rectangle(pen, 200, 200, 400, 500, clockwise=False)
    elif name == "D":
        pen.moveTo((100, 0))
        pen.lineTo((100, 700))
        pen.qCurveTo((500, 700), (500, 350))
        pen.qCurveTo((500, 0), (100, 0))
        pen.closePath()
    elif name == "i":
        _rectangle(pen, 100, 0, 200, 500)
        _rectangle(pen, 100, 600, 200, 700)
    elif name == "X":
        # Two fills that overlap without being merged
        _rectangle(pen, 0, 0, 300, 700)
        _rectangle(pen, 200, 200, 500, 500)


def build_test_font(path: Path, with_kerning: bool = True) -> Path:
    """Write a small TrueType font with known outlines to ``path``."""
    glyph_order = list(ADVANCES)
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(name): name for name in glyph_order if len(name) == 1} | {32: "space"})

    glyphs = {}
    for name in glyph_order:
        pen = TTGlyphPen(None)
        _draw(name, pen)
        glyphs[name] = pen.glyph()
    fb.setupGlyf(glyphs)

    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (ADVANCES[name], getattr(glyph_table[name], "xMin", 0)) for name in glyph_order}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "MeshType Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    if with_kerning:
        kern = newTable("kern")
        kern.version = 0
        subtable = KernTable_format_0()
        subtable.version = 0
        subtable.coverage = 1
        subtable.kernTable = dict(KERNING)
        kern.kernTables = [subtable]
        fb.font["kern"] = kern

    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def test_font_path(tmp_path_factory) -> Path:
    """Generated TrueType font with kerning."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "MeshTypeTest.ttf")


@pytest.fixture(scope="session")
def unkerned_font_path(tmp_path_factory) -> Path:
    """Generated TrueType font without a kern table."""
    return build_test_font(
        tmp_path_factory.mktemp("fonts") / "MeshTypeTest-NoKern.ttf", with_kerning=False
    )


def contour_from(coords: list[tuple[float, float]]) -> Contour:
    return Contour.from_points([Point(x, y) for x, y in coords])


@pytest.fixture
def make_contour() -> Callable[[list[tuple[float, float]]], Contour]:
    """Factory building a contour whose winding flag follows its geometry."""
    return contour_from


@pytest.fixture
def make_square() -> Callable[..., Contour]:
    """Factory for axis-aligned squares (clockwise unless asked otherwise)."""

    def _square(x0: float, y0: float, size: float, clockwise: bool = True) -> Contour:
        x1, y1 = x0 + size, y0 + size
        if clockwise:
            return contour_from([(x0, y0), (x0, y1), (x1, y1), (x1, y0)])
        return contour_from([(x0, y0), (x1, y0), (x1, y1), (x0, y1)])

    return _square


class FakeOutlineSource:
    """In-memory outline source for layout and mesher tests.

    Each entry of ``glyphs`` maps a character to a GlyphOutline; characters
    listed in ``broken`` fail to load, everything else is unmapped.
    """

    def __init__(
        self,
        glyphs: dict[str, GlyphOutline],
        kerning: dict[tuple[int, int], float] | None = None,
        broken: set[str] | None = None,
    ) -> None:
        self.glyphs = glyphs
        self.kerning_pairs = kerning or {}
        self.broken = broken or set()
        self.closed = False
        self.bezier_steps = 4
        self.loaded: list[int] = []
        self._by_index = {glyph.glyph_index: glyph for glyph in glyphs.values()}

    @property
    def has_kerning(self) -> bool:
        return bool(self.kerning_pairs)

    def glyph_index(self, character: str) -> int:
        if character in self.broken:
            return 999
        if character not in self.glyphs:
            raise GlyphNotFoundError(character)
        return self.glyphs[character].glyph_index

    def load_glyph(self, glyph_index: int) -> GlyphOutline:
        self.loaded.append(glyph_index)
        if glyph_index not in self._by_index:
            raise GlyphLoadError(glyph_index, "broken glyph")
        glyph = self._by_index[glyph_index]
        return GlyphOutline(
            glyph_index=glyph.glyph_index,
            contours=list(glyph.contours),
            advance=glyph.advance,
            lsb_delta=glyph.lsb_delta,
            rsb_delta=glyph.rsb_delta,
        )

    def kerning(self, left: int, right: int) -> float:
        return self.kerning_pairs.get((left, right), 0.0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_source() -> FakeOutlineSource:
    """Source with a square "a" (index 1), a ring "o" (index 2) and an empty space."""
    square = contour_from([(0, 0), (0, 10), (10, 10), (10, 0)])
    ring_outer = contour_from([(0, 0), (0, 10), (10, 10), (10, 0)])
    ring_inner = contour_from([(3, 3), (7, 3), (7, 7), (3, 7)])
    return FakeOutlineSource(
        glyphs={
            "a": GlyphOutline(glyph_index=1, contours=[square], advance=12.0),
            "o": GlyphOutline(glyph_index=2, contours=[ring_outer, ring_inner], advance=12.0),
            " ": GlyphOutline(glyph_index=3, contours=[], advance=5.0),
        },
        kerning={(1, 2): -2.0},
        broken={"x"},
    )


@pytest.fixture
def source_factory() -> type[FakeOutlineSource]:
    """The in-memory source class, for tests that need custom glyphs."""
    return FakeOutlineSource
