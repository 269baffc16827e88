"""A page-organised framebuffer for monochrome displays held in memory."""

from __future__ import annotations

from collections.abc import Iterable

from .colors import apply_pixel_op

__all__ = ["FrameBuffer", "PIXELS_PER_BYTE"]

PIXELS_PER_BYTE = 8


class FrameBuffer:
    """Display memory laid out as pages of 8 vertical pixels per byte.

    Byte ``page * width + column`` holds the pixels of column ``column`` in
    rows ``page * 8`` to ``page * 8 + 7``; bit 0 is the top row.
    """

    def __init__(self, width: int = 128, height: int = 32) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if height % PIXELS_PER_BYTE:
            raise ValueError(f"height must be a multiple of {PIXELS_PER_BYTE}")
        self.width = width
        self.height = height
        self.pages = height // PIXELS_PER_BYTE
        self._data = bytearray(width * self.pages)

    def _offset(self, page: int, column: int, count: int = 1) -> int:
        if not 0 <= page < self.pages:
            raise IndexError(f"page {page} out of range 0..{self.pages - 1}")
        if column < 0 or count < 0 or column + count > self.width:
            raise IndexError(
                f"columns {column}..{column + count - 1} out of range 0..{self.width - 1}"
            )
        return page * self.width + column

    def put_page(self, data: Iterable[int], page: int, column: int) -> None:
        """Copy ``data`` into ``page`` starting at ``column``."""
        chunk = bytes(data)
        start = self._offset(page, column, len(chunk))
        self._data[start:start + len(chunk)] = chunk

    def get_page(self, page: int, column: int, width: int) -> bytes:
        """Read ``width`` bytes from ``page`` starting at ``column``."""
        start = self._offset(page, column, width)
        return bytes(self._data[start:start + width])

    def put_byte(self, page: int, column: int, data: int) -> None:
        self._data[self._offset(page, column)] = data

    def get_byte(self, page: int, column: int) -> int:
        return self._data[self._offset(page, column)]

    def _locate(self, x: int, y: int) -> tuple[int, int] | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        page = y // PIXELS_PER_BYTE
        return page, 1 << (y - page * PIXELS_PER_BYTE)

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Apply a pixel operation at (x, y); pixels off the surface are ignored."""
        where = self._locate(x, y)
        if where is None:
            return
        page, mask = where
        self.put_byte(page, x, apply_pixel_op(self.get_byte(page, x), mask, color))

    def get_pixel(self, x: int, y: int) -> int:
        """Return a non-zero value if the pixel at (x, y) is set."""
        where = self._locate(x, y)
        if where is None:
            return 0
        page, mask = where
        return self.get_byte(page, x) & mask

    def mask_byte(self, page: int, column: int, pixel_mask: int, color: int) -> None:
        """Apply a pixel operation to the bits of one byte selected by ``pixel_mask``."""
        self.put_byte(
            page, column, apply_pixel_op(self.get_byte(page, column), pixel_mask, color)
        )

    def to_bytes(self) -> bytes:
        """Return the whole framebuffer, page after page."""
        return bytes(self._data)