"""Pixel operations, bitmap storage kinds and circle sector masks."""

from __future__ import annotations

import enum

__all__ = [
    "PixelOp",
    "BitmapType",
    "apply_pixel_op",
    "OCTANT0",
    "OCTANT1",
    "OCTANT2",
    "OCTANT3",
    "OCTANT4",
    "OCTANT5",
    "OCTANT6",
    "OCTANT7",
    "QUADRANT0",
    "QUADRANT1",
    "QUADRANT2",
    "QUADRANT3",
    "LEFT_HALF",
    "TOP_HALF",
    "RIGHT_HALF",
    "BOTTOM_HALF",
    "WHOLE",
]


class PixelOp(enum.IntEnum):
    """How a pixel is combined with what is already on the surface."""

    CLR = 0
    SET = 1
    XOR = 2


class BitmapType(enum.Enum):
    """Where the pixel data of a bitmap is kept."""

    RAM = 0
    PROGMEM = 1


OCTANT0 = 1 << 0
OCTANT1 = 1 << 1
OCTANT2 = 1 << 2
OCTANT3 = 1 << 3
OCTANT4 = 1 << 4
OCTANT5 = 1 << 5
OCTANT6 = 1 << 6
OCTANT7 = 1 << 7

QUADRANT0 = OCTANT0 | OCTANT1
QUADRANT1 = OCTANT2 | OCTANT3
QUADRANT2 = OCTANT4 | OCTANT5
QUADRANT3 = OCTANT6 | OCTANT7

LEFT_HALF = QUADRANT3 | QUADRANT0
TOP_HALF = QUADRANT0 | QUADRANT1
RIGHT_HALF = QUADRANT1 | QUADRANT2
BOTTOM_HALF = QUADRANT2 | QUADRANT3

WHOLE = 0xFF


def apply_pixel_op(value: int, mask: int, op: int) -> int:
    """Return the byte ``value`` with the bits in ``mask`` set, cleared or toggled.

    An operation that is not a known :class:`PixelOp` leaves the value as it is.
    """
    value &= 0xFF
    mask &= 0xFF
    if op == PixelOp.SET:
        return value | mask
    if op == PixelOp.CLR:
        return value & ~mask & 0xFF
    if op == PixelOp.XOR:
        return value ^ mask
    return value