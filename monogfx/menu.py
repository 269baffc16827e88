"""A simple scrolling menu for monochrome displays.

The first text line of the surface holds the title. The lines below it list
the options, one screen page at a time. An indicator bitmap marks the current
selection.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Protocol

from .colors import PixelOp
from .primitives import Bitmap, draw_filled_rect, put_bitmap
from .text import Font, draw_string

__all__ = ["MenuKey", "Menu", "EVENT_IDLE", "EVENT_EXIT"]

#: Nothing to report yet.
EVENT_IDLE = 0xFF
#: The user pressed the back key.
EVENT_EXIT = 0xFE


class _Surface(Protocol):
    width: int
    height: int

    def draw_pixel(self, x: int, y: int, color: int) -> None: ...

    def put_byte(self, page: int, column: int, data: int) -> None: ...

    def mask_byte(self, page: int, column: int, pixel_mask: int, color: int) -> None: ...

    def put_page(self, data: Iterable[int], page: int, column: int) -> None: ...


class MenuKey(enum.Enum):
    """Keys the menu reacts to."""

    DOWN = enum.auto()
    UP = enum.auto()
    ENTER = enum.auto()
    BACK = enum.auto()


class Menu:
    """A list of options drawn on a surface and moved through with keys."""

    def __init__(
        self,
        surface: _Surface,
        title: str,
        strings: Iterable[str],
        font: Font,
        indicator: Bitmap,
    ) -> None:
        self.surface = surface
        self.title = title
        self.strings = tuple(strings)
        self.font = font
        self.indicator = indicator
        if not self.strings:
            raise ValueError("a menu needs at least one option")
        if self.elements_per_screen <= 0:
            raise ValueError("the surface is too small to show any menu option")
        self.current_selection = 0
        self.current_page = 0
        self._redraw_pending = False

    @property
    def line_spacing(self) -> int:
        """Vertical distance between two text lines."""
        return self.font.height + 1

    @property
    def elements_per_screen(self) -> int:
        """Number of options shown below the title at once."""
        return self.surface.height // self.line_spacing - 1

    def _draw(self, redraw: bool) -> None:
        spacing = self.line_spacing
        per_screen = self.elements_per_screen
        height = self.surface.height
        menu_page = self.current_selection // per_screen

        if self.current_page != menu_page or redraw:
            draw_filled_rect(
                self.surface, 0, spacing, self.surface.width, height - spacing, PixelOp.CLR
            )
            self._redraw_pending = True

        self.current_page = menu_page

        draw_filled_rect(
            self.surface, 0, spacing, self.indicator.width, height - spacing, PixelOp.CLR
        )
        put_bitmap(
            self.surface,
            self.indicator,
            0,
            spacing * (self.current_selection % per_screen + 1),
        )

        if self._redraw_pending:
            first = menu_page * per_screen
            visible = self.strings[first:first + per_screen]
            for line, text in enumerate(visible, start=1):
                draw_string(
                    self.surface, text, self.indicator.width + 1, line * spacing, self.font
                )
            self._redraw_pending = False

    def show(self) -> None:
        """Clear the surface and draw the title and the options."""
        draw_filled_rect(
            self.surface, 0, 0, self.surface.width, self.surface.height, PixelOp.CLR
        )
        draw_string(self.surface, self.title, 0, 0, self.font)
        self._draw(True)

    def process_key(self, key: object) -> int:
        """Handle a key press.

        Returns the selected index for :attr:`MenuKey.ENTER`, :data:`EVENT_EXIT`
        for :attr:`MenuKey.BACK` and :data:`EVENT_IDLE` otherwise.
        """
        last = len(self.strings) - 1
        if key is MenuKey.DOWN:
            self.current_selection = 0 if self.current_selection == last else self.current_selection + 1
            self._draw(False)
            return EVENT_IDLE
        if key is MenuKey.UP:
            self.current_selection = self.current_selection - 1 if self.current_selection else last
            self._draw(False)
            return EVENT_IDLE
        if key is MenuKey.ENTER:
            return self.current_selection
        if key is MenuKey.BACK:
            return EVENT_EXIT
        return EVENT_IDLE