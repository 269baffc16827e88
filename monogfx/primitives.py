"""Drawing primitives for page-organised monochrome surfaces.

Every function draws on a *surface*: an object with ``width`` and ``height``
attributes and the byte and pixel access methods of
:class:`monogfx.framebuffer.FrameBuffer` (``draw_pixel``, ``get_byte``,
``put_byte``, ``mask_byte`` and ``put_page``).  Lines are clipped to the
surface, so shapes that reach past an edge are drawn only where they are
visible.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .colors import (
    OCTANT0,
    OCTANT1,
    OCTANT2,
    OCTANT3,
    OCTANT4,
    OCTANT5,
    OCTANT6,
    OCTANT7,
    QUADRANT0,
    QUADRANT1,
    QUADRANT2,
    QUADRANT3,
    BitmapType,
)
from .framebuffer import PIXELS_PER_BYTE

__all__ = [
    "Bitmap",
    "draw_horizontal_line",
    "draw_vertical_line",
    "draw_line",
    "draw_rect",
    "draw_filled_rect",
    "draw_circle",
    "draw_filled_circle",
    "put_bitmap",
]


class _Surface(Protocol):
    width: int
    height: int

    def draw_pixel(self, x: int, y: int, color: int) -> None: ...

    def get_byte(self, page: int, column: int) -> int: ...

    def put_byte(self, page: int, column: int, data: int) -> None: ...

    def mask_byte(self, page: int, column: int, pixel_mask: int, color: int) -> None: ...

    def put_page(self, data: Iterable[int], page: int, column: int) -> None: ...


@dataclass(frozen=True)
class Bitmap:
    """Pixel data in display page layout: ``height // 8`` pages of ``width`` bytes."""

    width: int
    height: int
    data: bytes
    type: BitmapType = BitmapType.RAM

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("bitmap width and height must not be negative")
        object.__setattr__(self, "data", bytes(self.data))
        needed = self.width * (self.height // PIXELS_PER_BYTE)
        if len(self.data) < needed:
            raise ValueError(
                f"bitmap of {self.width}x{self.height} needs {needed} bytes, "
                f"got {len(self.data)}"
            )

    @property
    def pages(self) -> int:
        return self.height // PIXELS_PER_BYTE

    def page_data(self, index: int) -> bytes:
        """Return the bytes of page ``index`` of the bitmap."""
        start = index * self.width
        return self.data[start:start + self.width]


def draw_horizontal_line(surface: _Surface, x: int, y: int, length: int, color: int) -> None:
    """Draw a one pixel high line from (x, y) to the right over ``length`` pixels."""
    if length <= 0 or not 0 <= y < surface.height:
        return
    start = max(x, 0)
    end = min(x + length, surface.width)
    if start >= end:
        return
    page, bit = divmod(y, PIXELS_PER_BYTE)
    mask = 1 << bit
    for column in reversed(range(start, end)):
        surface.mask_byte(page, column, mask, color)


def draw_vertical_line(surface: _Surface, x: int, y: int, length: int, color: int) -> None:
    """Draw a one pixel wide line from (x, y) downwards over ``length`` pixels."""
    if length <= 0 or not 0 <= x < surface.width:
        return
    y1 = max(y, 0)
    y2 = min(y + length - 1, surface.height - 1)
    if y1 > y2:
        return
    if y1 == y2:
        surface.draw_pixel(x, y1, color)
        return

    first_page, first_bit = divmod(y1, PIXELS_PER_BYTE)
    last_page, last_bit = divmod(y2, PIXELS_PER_BYTE)
    first_mask = (0xFF << first_bit) & 0xFF
    last_mask = 0xFF >> (7 - last_bit)

    if first_page == last_page:
        surface.mask_byte(first_page, x, first_mask & last_mask, color)
        return

    surface.mask_byte(first_page, x, first_mask, color)
    for page in range(first_page + 1, last_page):
        surface.mask_byte(page, x, 0xFF, color)
    surface.mask_byte(last_page, x, last_mask, color)


def draw_line(surface: _Surface, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
    """Draw a line between two points, both ends included."""
    if x1 > x2:
        x1, y1, x2, y2 = x2, y2, x1, y1

    dx = x2 - x1
    dy = y2 - y1
    xinc = 1
    yinc = 1
    if dy < 0:
        yinc = -1
        dy = -dy

    x, y = x1, y1
    if dx > dy:
        error = dy - dx
        for _ in range(dx + 1):
            surface.draw_pixel(x, y, color)
            if error >= 0:
                error -= dx
                y += yinc
            error += dy
            x += xinc
    else:
        error = dx - dy
        for _ in range(dy + 1):
            surface.draw_pixel(x, y, color)
            if error >= 0:
                error -= dy
                x += xinc
            error += dx
            y += yinc


def draw_rect(surface: _Surface, x: int, y: int, width: int, height: int, color: int) -> None:
    """Draw the outline of a rectangle."""
    draw_horizontal_line(surface, x, y, width, color)
    draw_horizontal_line(surface, x, y + height - 1, width, color)
    draw_vertical_line(surface, x, y, height, color)
    draw_vertical_line(surface, x + width - 1, y, height, color)


def draw_filled_rect(
    surface: _Surface, x: int, y: int, width: int, height: int, color: int
) -> None:
    """Fill a rectangle, row by row from the bottom up."""
    for row in reversed(range(max(height, 0))):
        draw_horizontal_line(surface, x, y + row, width, color)


def _circle_offsets(radius: int):
    """Yield the (offset_x, offset_y) pairs of one octant of a circle."""
    offset_x = 0
    offset_y = radius
    error = 3 - 2 * radius
    while offset_x <= offset_y:
        yield offset_x, offset_y
        if error < 0:
            error += (offset_x << 2) + 6
        else:
            error += ((offset_x - offset_y) << 2) + 10
            offset_y -= 1
        offset_x += 1


def draw_circle(
    surface: _Surface, x: int, y: int, radius: int, color: int, octant_mask: int
) -> None:
    """Draw the outline of a circle, or of the octants picked by ``octant_mask``."""
    if radius == 0:
        surface.draw_pixel(x, y, color)
        return

    for ox, oy in _circle_offsets(radius):
        points = (
            (OCTANT0, x + oy, y - ox),
            (OCTANT1, x + ox, y - oy),
            (OCTANT2, x - ox, y - oy),
            (OCTANT3, x - oy, y - ox),
            (OCTANT4, x - oy, y + ox),
            (OCTANT5, x - ox, y + oy),
            (OCTANT6, x + ox, y + oy),
            (OCTANT7, x + oy, y + ox),
        )
        for octant, px, py in points:
            if octant_mask & octant:
                surface.draw_pixel(px, py, color)


def draw_filled_circle(
    surface: _Surface, x: int, y: int, radius: int, color: int, quadrant_mask: int
) -> None:
    """Fill a circle, or the quadrants picked by ``quadrant_mask``."""
    if radius == 0:
        surface.draw_pixel(x, y, color)
        return

    for ox, oy in _circle_offsets(radius):
        if quadrant_mask & QUADRANT0:
            draw_vertical_line(surface, x + oy, y - ox, ox + 1, color)
            draw_vertical_line(surface, x + ox, y - oy, oy + 1, color)
        if quadrant_mask & QUADRANT1:
            draw_vertical_line(surface, x - oy, y - ox, ox + 1, color)
            draw_vertical_line(surface, x - ox, y - oy, oy + 1, color)
        if quadrant_mask & QUADRANT2:
            draw_vertical_line(surface, x - oy, y, ox + 1, color)
            draw_vertical_line(surface, x - ox, y, oy + 1, color)
        if quadrant_mask & QUADRANT3:
            draw_vertical_line(surface, x + oy, y, ox + 1, color)
            draw_vertical_line(surface, x + ox, y, oy + 1, color)


def put_bitmap(surface: _Surface, bitmap: Bitmap, x: int, y: int) -> None:
    """Copy a bitmap to the surface; ``y`` is rounded down to a page boundary."""
    page = y // PIXELS_PER_BYTE
    if bitmap.type is BitmapType.PROGMEM:
        for index in range(bitmap.pages):
            for column, value in enumerate(bitmap.page_data(index)):
                surface.put_byte(page + index, x + column, value)
    elif bitmap.type is BitmapType.RAM:
        for index in range(bitmap.pages):
            if bitmap.width:
                surface.put_page(bitmap.page_data(index), page + index, x)