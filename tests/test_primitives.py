import math

import pytest

from monogfx.colors import (
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
    WHOLE,
    BitmapType,
    PixelOp,
)
from monogfx.framebuffer import FrameBuffer
from monogfx.primitives import (
    Bitmap,
    draw_circle,
    draw_filled_circle,
    draw_filled_rect,
    draw_horizontal_line,
    draw_line,
    draw_rect,
    draw_vertical_line,
    put_bitmap,
)


@pytest.fixture
def fb():
    return FrameBuffer(128, 32)


def lit(surface):
    return {
        (x, y)
        for x in range(surface.width)
        for y in range(surface.height)
        if surface.get_pixel(x, y)
    }


def test_horizontal_line_pixels(fb):
    draw_horizontal_line(fb, 10, 5, 10, PixelOp.SET)
    assert lit(fb) == {(x, 5) for x in range(10, 20)}


def test_horizontal_line_clipped_at_right_edge(fb):
    draw_horizontal_line(fb, 120, 3, 20, PixelOp.SET)
    assert lit(fb) == {(x, 3) for x in range(120, 128)}


def test_horizontal_line_zero_length_draws_nothing(fb):
    draw_horizontal_line(fb, 10, 5, 0, PixelOp.SET)
    assert lit(fb) == set()


def test_horizontal_line_xor_twice_restores(fb):
    draw_filled_rect(fb, 0, 0, 30, 10, PixelOp.SET)
    before = fb.to_bytes()
    draw_horizontal_line(fb, 5, 4, 50, PixelOp.XOR)
    assert fb.to_bytes() != before
    draw_horizontal_line(fb, 5, 4, 50, PixelOp.XOR)
    assert fb.to_bytes() == before


def test_horizontal_line_clear(fb):
    draw_filled_rect(fb, 0, 0, 20, 8, PixelOp.SET)
    draw_horizontal_line(fb, 0, 2, 20, PixelOp.CLR)
    assert not any(fb.get_pixel(x, 2) for x in range(20))
    assert all(fb.get_pixel(x, 1) for x in range(20))


def test_vertical_line_across_pages(fb):
    draw_vertical_line(fb, 7, 3, 20, PixelOp.SET)
    assert lit(fb) == {(7, y) for y in range(3, 23)}
    assert fb.get_byte(0, 7) == 0xF8
    assert fb.get_byte(1, 7) == 0xFF
    assert fb.get_byte(2, 7) == 0x7F


def test_vertical_line_within_one_page(fb):
    draw_vertical_line(fb, 2, 9, 3, PixelOp.SET)
    assert lit(fb) == {(2, 9), (2, 10), (2, 11)}


def test_vertical_line_single_pixel(fb):
    draw_vertical_line(fb, 4, 4, 1, PixelOp.SET)
    assert lit(fb) == {(4, 4)}


def test_vertical_line_clipped_at_bottom(fb):
    draw_vertical_line(fb, 0, 28, 100, PixelOp.SET)
    assert lit(fb) == {(0, y) for y in range(28, 32)}


def test_vertical_line_off_surface_is_ignored(fb):
    draw_vertical_line(fb, 200, 0, 10, PixelOp.SET)
    draw_vertical_line(fb, -3, 0, 10, PixelOp.SET)
    assert fb.to_bytes() == bytes(len(fb.to_bytes()))


@pytest.mark.parametrize(
    "x1,y1,x2,y2",
    [(0, 0, 10, 3), (5, 20, 30, 2), (7, 0, 7, 9), (0, 0, 3, 3), (40, 31, 10, 0)],
)
def test_line_endpoints_and_length(fb, x1, y1, x2, y2):
    draw_line(fb, x1, y1, x2, y2, PixelOp.SET)
    pixels = lit(fb)
    assert (x1, y1) in pixels
    assert (x2, y2) in pixels
    assert len(pixels) == max(abs(x2 - x1), abs(y2 - y1)) + 1


@pytest.mark.parametrize("a,b", [((0, 0), (10, 3)), ((5, 20), (30, 2)), ((3, 1), (3, 30))])
def test_line_direction_does_not_matter(a, b):
    forward = FrameBuffer(128, 32)
    backward = FrameBuffer(128, 32)
    draw_line(forward, *a, *b, PixelOp.SET)
    draw_line(backward, *b, *a, PixelOp.SET)
    assert forward.to_bytes() == backward.to_bytes()


def test_line_diagonal(fb):
    draw_line(fb, 0, 0, 3, 3, PixelOp.SET)
    assert lit(fb) == {(0, 0), (1, 1), (2, 2), (3, 3)}


def test_rect_outline(fb):
    draw_rect(fb, 10, 4, 20, 12, PixelOp.SET)
    pixels = lit(fb)
    assert len(pixels) == 2 * 20 + 2 * 12 - 4
    for corner in [(10, 4), (29, 4), (10, 15), (29, 15)]:
        assert corner in pixels
    assert not any((x, y) in pixels for x in range(11, 29) for y in range(5, 15))


def test_filled_rect(fb):
    draw_filled_rect(fb, 3, 5, 7, 11, PixelOp.SET)
    assert lit(fb) == {(x, y) for x in range(3, 10) for y in range(5, 16)}


def test_filled_rect_zero_height(fb):
    draw_filled_rect(fb, 3, 5, 7, 0, PixelOp.SET)
    assert lit(fb) == set()


def test_circle_radius_zero_is_one_pixel(fb):
    draw_circle(fb, 20, 10, 0, PixelOp.SET, WHOLE)
    assert lit(fb) == {(20, 10)}


def test_circle_shape(fb):
    cx, cy, r = 60, 15, 10
    draw_circle(fb, cx, cy, r, PixelOp.SET, WHOLE)
    pixels = lit(fb)
    for point in [(cx + r, cy), (cx - r, cy), (cx, cy + r), (cx, cy - r)]:
        assert point in pixels
    for x, y in pixels:
        assert abs(math.hypot(x - cx, y - cy) - r) < 1
        assert (2 * cx - x, y) in pixels
        assert (x, 2 * cy - y) in pixels


def test_circle_octants_make_whole():
    whole = FrameBuffer(128, 32)
    draw_circle(whole, 60, 15, 12, PixelOp.SET, WHOLE)
    parts = FrameBuffer(128, 32)
    for octant in (OCTANT0, OCTANT1, OCTANT2, OCTANT3, OCTANT4, OCTANT5, OCTANT6, OCTANT7):
        draw_circle(parts, 60, 15, 12, PixelOp.SET, octant)
    assert parts.to_bytes() == whole.to_bytes()


def test_circle_clipped_at_edges(fb):
    draw_circle(fb, 0, 0, 5, PixelOp.SET, WHOLE)
    pixels = lit(fb)
    assert (5, 0) in pixels
    assert (0, 5) in pixels
    assert all(x >= 0 and y >= 0 for x, y in pixels)


def test_filled_circle_contents(fb):
    cx, cy, r = 60, 15, 8
    draw_filled_circle(fb, cx, cy, r, PixelOp.SET, WHOLE)
    pixels = lit(fb)
    assert (cx, cy) in pixels
    for x, y in pixels:
        assert math.hypot(x - cx, y - cy) <= r + 0.5
    for x in range(cx - 4, cx + 5):
        for y in range(cy - 4, cy + 5):
            assert (x, y) in pixels


def test_filled_circle_covers_outline():
    filled = FrameBuffer(128, 32)
    draw_filled_circle(filled, 50, 16, 9, PixelOp.SET, WHOLE)
    outline = FrameBuffer(128, 32)
    draw_circle(outline, 50, 16, 9, PixelOp.SET, WHOLE)
    assert lit(outline) <= lit(filled)


def test_filled_circle_quadrants_make_whole():
    whole = FrameBuffer(128, 32)
    draw_filled_circle(whole, 64, 16, 10, PixelOp.SET, WHOLE)
    parts = FrameBuffer(128, 32)
    for quadrant in (QUADRANT0, QUADRANT1, QUADRANT2, QUADRANT3):
        draw_filled_circle(parts, 64, 16, 10, PixelOp.SET, quadrant)
    assert parts.to_bytes() == whole.to_bytes()


def test_filled_circle_near_corner_is_clipped(fb):
    draw_filled_circle(fb, 2, 2, 6, PixelOp.SET, WHOLE)
    pixels = lit(fb)
    assert (0, 0) in pixels
    assert (8, 2) in pixels


@pytest.mark.parametrize("kind", [BitmapType.RAM, BitmapType.PROGMEM])
def test_put_bitmap(fb, kind):
    data = bytes([1, 2, 3, 4, 5, 6])
    bitmap = Bitmap(width=3, height=16, data=data, type=kind)
    put_bitmap(fb, bitmap, 10, 10)
    assert fb.get_page(1, 10, 3) == data[:3]
    assert fb.get_page(2, 10, 3) == data[3:]
    assert fb.get_page(0, 10, 3) == bytes(3)


def test_put_bitmap_rounds_y_down_to_page(fb):
    bitmap = Bitmap(width=2, height=8, data=b"\xaa\x55")
    put_bitmap(fb, bitmap, 0, 5)
    assert fb.get_page(0, 0, 2) == b"\xaa\x55"


def test_bitmap_with_too_little_data():
    with pytest.raises(ValueError):
        Bitmap(width=4, height=16, data=b"\x00\x00\x00")


def test_put_bitmap_outside_surface(fb):
    bitmap = Bitmap(width=2, height=8, data=b"\x01\x02")
    with pytest.raises(IndexError):
        put_bitmap(fb, bitmap, 127, 0)