"""meshtype - Turn a line of text into an extruded 3D triangle mesh.

meshtype lays out text with a TrueType/OpenType font (advance widths, kerning
and side-bearing correction included), works out which glyph contours are
fills and which are holes, triangulates the resulting faces and extrudes them
into a closed solid.

Example:
    $ meshtype Roboto-Regular.ttf "Hello" --depth 5

This will create Roboto-Regular-Hello.stl next to the font.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
