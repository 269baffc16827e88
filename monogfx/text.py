"""Bitmap fonts and text drawing on monochrome surfaces.

Glyph data is stored row by row. Each row takes ``ceil(width / 8)`` bytes,
and the most significant bit of a byte is the leftmost pixel. Glyphs follow
one another in character order, starting at ``first_char``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .colors import PixelOp
from .primitives import draw_filled_rect

__all__ = ["Font", "draw_char", "draw_string", "string_bounding_box", "FONT_PIXELS_PER_BYTE"]

FONT_PIXELS_PER_BYTE = 8


class _Surface(Protocol):
    width: int
    height: int

    def draw_pixel(self, x: int, y: int, color: int) -> None: ...

    def mask_byte(self, page: int, column: int, pixel_mask: int, color: int) -> None: ...


def _code(ch: str | int) -> int:
    if isinstance(ch, int):
        return ch
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ord(ch)


@dataclass(frozen=True)
class Font:
    """A fixed-size monochrome font covering ``first_char`` to ``last_char``."""

    width: int
    height: int
    first_char: int
    last_char: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("font width and height must be positive")
        if self.first_char > self.last_char:
            raise ValueError("first_char must not come after last_char")
        object.__setattr__(self, "data", bytes(self.data))
        needed = self.glyph_size * (self.last_char - self.first_char + 1)
        if len(self.data) < needed:
            raise ValueError(f"font needs {needed} bytes of glyph data, got {len(self.data)}")

    @property
    def row_size(self) -> int:
        """Bytes used by one row of a glyph."""
        return -(-self.width // FONT_PIXELS_PER_BYTE)

    @property
    def glyph_size(self) -> int:
        """Bytes used by one glyph."""
        return self.row_size * self.height

    def glyph(self, ch: str | int) -> bytes:
        """Return the glyph data of character ``ch``."""
        code = _code(ch)
        if not self.first_char <= code <= self.last_char:
            raise ValueError(f"character {code} is not in the font")
        start = self.glyph_size * (code - self.first_char)
        return self.data[start:start + self.glyph_size]


def draw_char(surface: _Surface, ch: str | int, x: int, y: int, font: Font) -> None:
    """Clear the character cell at (x, y) and draw ``ch`` into it."""
    glyph = font.glyph(ch)
    draw_filled_rect(surface, x, y, font.width, font.height, PixelOp.CLR)
    row_size = font.row_size
    for row in range(font.height):
        row_bytes = glyph[row * row_size:(row + 1) * row_size]
        for i in range(font.width):
            byte = row_bytes[i // FONT_PIXELS_PER_BYTE]
            if byte & (0x80 >> (i % FONT_PIXELS_PER_BYTE)):
                surface.draw_pixel(x + i, y + row, PixelOp.SET)


def draw_string(surface: _Surface, text: str, x: int, y: int, font: Font) -> None:
    """Draw ``text`` at (x, y); ``\\n`` starts a new line and ``\\r`` is skipped."""
    start_x = x
    for ch in text:
        if ch == "\n":
            x = start_x
            y += font.height + 1
        elif ch == "\r":
            continue
        else:
            draw_char(surface, ch, x, y, font)
            x += font.width


def string_bounding_box(text: str, font: Font) -> tuple[int, int]:
    """Return the (width, height) that ``text`` takes up in ``font``.

    An empty string gives a width of 1 and the font height.
    """
    max_width = 1
    max_height = font.height
    x = 0
    for ch in text:
        if ch == "\n":
            x = 0
            max_height += font.height
        elif ch == "\r":
            continue
        else:
            x += font.width
            max_width = max(max_width, x)
    return max_width, max_height