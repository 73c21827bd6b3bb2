"""Exception hierarchy for meshtype."""


class MeshTypeError(Exception):
    """Base exception for all meshtype errors."""

    pass


class FontError(MeshTypeError):
    """Errors related to opening or sizing a font."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSizeError(FontError):
    """The requested nominal size cannot be used."""

    def __init__(self, font_height: float) -> None:
        self.font_height = font_height
        super().__init__(f"Invalid nominal font size: {font_height}")


class GlyphError(MeshTypeError):
    """Errors related to a single glyph."""

    pass


class GlyphNotFoundError(GlyphError):
    """Character has no glyph in the font."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"No glyph for character {character!r} (U+{ord(character):04X})")


class GlyphLoadError(GlyphError):
    """Glyph could not be loaded from the font."""

    def __init__(self, glyph_index: int, reason: str) -> None:
        self.glyph_index = glyph_index
        self.reason = reason
        super().__init__(f"Failed to load glyph #{glyph_index}: {reason}")


class GlyphOutlineError(GlyphError):
    """Glyph outline could not be extracted."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Failed to extract outline of '{glyph_name}': {reason}")


class GeometryError(MeshTypeError):
    """Errors in geometric calculations."""

    pass


class TessellationError(GeometryError):
    """Error triangulating a cap."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MeshExportError(MeshTypeError):
    """Error writing a mesh to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export mesh '{path}': {reason}")
