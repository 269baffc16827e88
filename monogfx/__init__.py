"""Monochrome graphics for page-organised LCD framebuffers: pixels, lines, circles, bitmaps, text and menus."""

__version__ = "0.1.0"

__all__ = ["colors", "errors", "framebuffer", "primitives", "display", "text", "menu"]