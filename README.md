# monogfx

Drawing on small monochrome displays whose memory is organised in pages.
Each byte holds a vertical strip of eight pixels, with bit 0 as the top row.
A page is one row of such bytes across the screen.

## Modules

- `monogfx.colors`: the pixel operations `PixelOp.SET`, `PixelOp.CLR` and
  `PixelOp.XOR`, the `BitmapType` enum (`RAM`, `PROGMEM`) and
  `apply_pixel_op(value, mask, op)`. It also holds the circle sector masks
  `OCTANT0`…`OCTANT7`, `QUADRANT0`…`QUADRANT3`, `LEFT_HALF`, `TOP_HALF`,
  `RIGHT_HALF`, `BOTTOM_HALF` and `WHOLE`.
- `monogfx.errors`: the `StatusCode` enum, with a `description` for each code,
  and the `StatusError` exception, which carries a non-success code.
- `monogfx.framebuffer`: `FrameBuffer(width=128, height=32)`, an in-memory page
  buffer. It has `put_page`, `get_page`, `put_byte`, `get_byte`, `draw_pixel`,
  `get_pixel`, `mask_byte` and `to_bytes`. A page or column access outside the
  buffer raises `IndexError`. Pixels outside it are ignored, and reading one
  returns 0.
- `monogfx.primitives`: `draw_horizontal_line`, `draw_vertical_line`,
  `draw_line`, `draw_rect`, `draw_filled_rect`, `draw_circle` (by octant mask),
  `draw_filled_circle` (by quadrant mask) and `put_bitmap`. Each one works on
  any surface that has the framebuffer's byte and pixel methods. Horizontal
  and vertical lines are clipped to the surface. `Bitmap` holds pixel data in
  page layout, and `put_bitmap` rounds `y` down to a page boundary.
- `monogfx.display`: `C12832Display`, a 128×32 display model. It keeps a
  `FrameBuffer` and answers reads from it. Every write to the controller is
  reported as `on_write(page, column, data)`. It has all the drawing
  primitives as methods, plus `init()`, which clears the display, and
  `put_framebuffer()`, which sends the whole buffer.
- `monogfx.text`: `Font` (glyph rows with the most significant bit leftmost),
  `draw_char`, `draw_string` and `string_bounding_box`. In strings, `\n`
  starts a new line and `\r` is skipped.
- `monogfx.menu`: `Menu` and `MenuKey`, a scrolling selection menu.
  `process_key` returns the selected index for `ENTER`, `EVENT_EXIT` for
  `BACK` and `EVENT_IDLE` for anything else.

## Installation

```
pip install .
```

## Example

```python
from monogfx.colors import PixelOp
from monogfx.display import C12832Display
from monogfx.menu import Menu, MenuKey
from monogfx.primitives import Bitmap
from monogfx.text import Font, string_bounding_box

writes = []
display = C12832Display(on_write=lambda page, column, data: writes.append((page, column, data)))
display.init()

display.draw_line(10, 10, 20, 20, PixelOp.SET)
display.draw_rect(0, 0, 128, 32, PixelOp.SET)
assert display.get_pixel(15, 15)

# A blank 6x7 font covering the printable ASCII range.
font = Font(width=6, height=7, first_char=32, last_char=126, data=bytes(7 * 95))
assert string_bounding_box("ab\ncd", font) == (12, 14)

arrow = Bitmap(width=5, height=8, data=bytes([0x08, 0x08, 0x3E, 0x1C, 0x08]))
menu = Menu(display, "Main", ["One", "Two", "Three"], font, arrow)
menu.show()
menu.process_key(MenuKey.DOWN)
assert menu.process_key(MenuKey.ENTER) == 1
```

## What it does not do

- It does not talk to real display hardware. `C12832Display` only reports
  controller writes through its `on_write` callback. Sending them anywhere is
  left to the caller.
- It comes with no built-in font. A `Font` must be built from glyph data that
  the caller supplies.
- There is no command-line program. The package is a library only.

## Running the tests

```
pip install .[test]
pytest
```