"""The C12832 A1Z monochrome LCD on an ST7565R controller, driven over SPI.

The controller cannot be read back over a serial interface, so every byte
sent to it is also kept in a local :class:`~monogfx.framebuffer.FrameBuffer`.
Reads are answered from that buffer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from . import primitives
from .colors import apply_pixel_op
from .framebuffer import PIXELS_PER_BYTE, FrameBuffer
from .primitives import Bitmap

__all__ = [
    "C12832Display",
    "LCD_WIDTH",
    "LCD_HEIGHT",
    "LCD_PIXELS_PER_BYTE",
    "LCD_PAGES",
    "LCD_FRAMEBUFFER_SIZE",
]

LCD_WIDTH = 128
LCD_HEIGHT = 32
LCD_PIXELS_PER_BYTE = PIXELS_PER_BYTE
LCD_PAGES = LCD_HEIGHT // LCD_PIXELS_PER_BYTE
LCD_FRAMEBUFFER_SIZE = (LCD_WIDTH * LCD_HEIGHT) // LCD_PIXELS_PER_BYTE

WriteCallback = Callable[[int, int, bytes], None]


class C12832Display:
    """A 128x32 display whose controller writes go to ``on_write``.

    ``on_write(page, column, data)`` is called for every block of bytes sent
    to the controller, after the page and column address have been set.
    """

    width = LCD_WIDTH
    height = LCD_HEIGHT
    pages = LCD_PAGES

    def __init__(self, on_write: WriteCallback | None = None) -> None:
        self._on_write = on_write
        self.framebuffer = FrameBuffer(LCD_WIDTH, LCD_HEIGHT)

    def _send(self, page: int, column: int, data: bytes) -> None:
        if self._on_write is not None:
            self._on_write(page, column, data)

    def init(self) -> None:
        """Clear the controller memory and the framebuffer, byte by byte."""
        for page in range(LCD_PAGES):
            for column in range(LCD_WIDTH):
                self.put_byte(page, column, 0x00)

    def put_framebuffer(self) -> None:
        """Send the whole framebuffer to the controller, one page at a time."""
        for page in range(LCD_PAGES):
            self.put_page(self.framebuffer.get_page(page, 0, LCD_WIDTH), page, 0)

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Apply a pixel operation at (x, y); pixels off the screen are ignored."""
        if not (0 <= x < LCD_WIDTH and 0 <= y < LCD_HEIGHT):
            return
        page = y // LCD_PIXELS_PER_BYTE
        mask = 1 << (y - page * LCD_PIXELS_PER_BYTE)
        self.put_byte(page, x, apply_pixel_op(self.get_byte(page, x), mask, color))

    def get_pixel(self, x: int, y: int) -> int:
        """Return a non-zero value if the pixel at (x, y) is set."""
        if not (0 <= x < LCD_WIDTH and 0 <= y < LCD_HEIGHT):
            return 0
        page = y // LCD_PIXELS_PER_BYTE
        mask = 1 << (y - page * LCD_PIXELS_PER_BYTE)
        return self.get_byte(page, x) & mask

    def put_page(self, data: Iterable[int], page: int, column: int) -> None:
        """Write ``data`` to ``page`` from ``column`` on, in the buffer and controller."""
        chunk = bytes(data)
        if not chunk:
            raise ValueError("put_page needs at least one byte")
        self.framebuffer.put_page(chunk, page, column)
        self._send(page, column, chunk)

    def get_page(self, page: int, column: int, width: int) -> bytes:
        """Read ``width`` bytes of ``page`` from ``column`` on."""
        if width <= 0:
            raise ValueError("get_page needs a positive width")
        return self.framebuffer.get_page(page, column, width)

    def put_byte(self, page: int, column: int, data: int) -> None:
        """Write one byte to the buffer and the controller."""
        self.framebuffer.put_byte(page, column, data)
        self._send(page, column, bytes([data]))

    def get_byte(self, page: int, column: int) -> int:
        return self.framebuffer.get_byte(page, column)

    def mask_byte(self, page: int, column: int, pixel_mask: int, color: int) -> None:
        """Read, modify and write back the bits of one byte selected by ``pixel_mask``."""
        value = apply_pixel_op(self.get_byte(page, column), pixel_mask, color)
        self.put_byte(page, column, value)

    def draw_horizontal_line(self, x: int, y: int, length: int, color: int) -> None:
        primitives.draw_horizontal_line(self, x, y, length, color)

    def draw_vertical_line(self, x: int, y: int, length: int, color: int) -> None:
        primitives.draw_vertical_line(self, x, y, length, color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        primitives.draw_line(self, x1, y1, x2, y2, color)

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        primitives.draw_rect(self, x, y, width, height, color)

    def draw_filled_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        primitives.draw_filled_rect(self, x, y, width, height, color)

    def draw_circle(
        self, x: int, y: int, radius: int, color: int, octant_mask: int
    ) -> None:
        primitives.draw_circle(self, x, y, radius, color, octant_mask)

    def draw_filled_circle(
        self, x: int, y: int, radius: int, color: int, quadrant_mask: int
    ) -> None:
        primitives.draw_filled_circle(self, x, y, radius, color, quadrant_mask)

    def put_bitmap(self, bitmap: Bitmap, x: int, y: int) -> None:
        primitives.put_bitmap(self, bitmap, x, y)