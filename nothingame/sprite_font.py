"""Glyph layout for the fixed-size bitmap font."""

from __future__ import annotations

from nothingame.point import Vec
from nothingame.rect import Rect

FONT_CHAR_WIDTH = 7
FONT_CHAR_HEIGHT = 9
FONT_ROW_SIZE = 18

_FIRST_GLYPH = 32
_LAST_GLYPH = 126


def char_rect(c: str) -> Rect:
    """Source rectangle of a character in the font sheet.

    Characters outside printable ASCII are drawn as '?'.
    """
    code = ord(c)
    if not _FIRST_GLYPH <= code <= _LAST_GLYPH:
        return char_rect("?")
    index = code - _FIRST_GLYPH
    return Rect(
        (index % FONT_ROW_SIZE) * FONT_CHAR_WIDTH,
        (index // FONT_ROW_SIZE) * FONT_CHAR_HEIGHT,
        FONT_CHAR_WIDTH,
        FONT_CHAR_HEIGHT,
    )


def boundary_box(position: Vec, size: Vec, text: str) -> Rect:
    """Screen rectangle covered by text drawn at position with scale size."""
    return Rect(
        position.x,
        position.y,
        size.x * FONT_CHAR_WIDTH * len(text),
        size.y * FONT_CHAR_HEIGHT,
    )


def glyph_rects(position: Vec, size: Vec, text: str) -> list[tuple[Rect, Rect]]:
    """(source, destination) rectangle pairs for every character of text."""
    pairs = []
    for i, c in enumerate(text):
        source = char_rect(c)
        destination = Rect(
            position.x + FONT_CHAR_WIDTH * i * size.x,
            position.y,
            source.w * size.x,
            source.h * size.y,
        )
        pairs.append((source, destination))
    return pairs