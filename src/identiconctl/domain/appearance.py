"""Digest → (foreground color, paint mask).

Foreground uses the last four digest bytes:

- byte 12 low nibble + byte 13 → 12-bit hue, mapped onto ``[0, 360]``
- byte 14 → saturation, mapped *inversely* onto ``[65, 45]``
- byte 15 → luminance, mapped *inversely* onto ``[75, 55]``

The mask uses the first 15 nibbles (high nibble first).  Nibble ``i`` fills
the half-grid column-major starting from the rightmost (center) column.
An even nibble paints its cell.
"""

from __future__ import annotations

import logging

from identiconctl.domain.color import HUE_MAX, HSLColor, RGBColor
from identiconctl.domain.digest import validate_digest

logger = logging.getLogger(__name__)

SAT_MIN = 45
SAT_MAX = 65
LUM_MIN = 55
LUM_MAX = 75

NUM_SQUARES = 7
MASK_COLS = NUM_SQUARES // 2
MASK_ROWS = NUM_SQUARES - 2
MASK_SIZE = MASK_COLS * MASK_ROWS

PaintMask = tuple[bool, ...]


def linear_map(value: float, vmin: float, vmax: float, dmin: float, dmax: float) -> float:
    """Linearly map *value* in ``[vmin, vmax]`` onto ``[dmin, dmax]``."""
    return dmin + ((value - vmin) * (dmax - dmin)) / (vmax - vmin)


def derive_foreground(digest: bytes) -> RGBColor:
    """Compute the foreground color from digest bytes 12-15.

    Raises:
        HSLOutOfRangeError: if a mapped component leaves its domain.
    """
    validate_digest(digest)
    hue_raw = ((digest[12] & 0x0F) << 8) | digest[13]
    sat_raw = digest[14]
    lum_raw = digest[15]

    hue = linear_map(hue_raw, 0, 4095, 0, HUE_MAX)
    sat = linear_map(sat_raw, 0, 255, SAT_MAX, SAT_MIN)
    lum = linear_map(lum_raw, 0, 255, LUM_MAX, LUM_MIN)

    color = HSLColor(hue, sat, lum).to_rgb()
    logger.debug("Derived foreground hsl=(%.2f, %.2f, %.2f) rgb=%s", hue, sat, lum, color)
    return color


def _nibbles(digest: bytes) -> list[int]:
    nibbles: list[int] = []
    for byte in digest:
        nibbles.append((byte & 0xF0) >> 4)
        nibbles.append(byte & 0x0F)
    return nibbles


def derive_mask(digest: bytes) -> PaintMask:
    """Compute the 15-cell paint mask from the first 15 digest nibbles."""
    validate_digest(digest)
    paints = [False] * MASK_SIZE
    for i, nibble in enumerate(_nibbles(digest)[:MASK_SIZE]):
        col = (MASK_COLS - 1) - i // MASK_ROWS
        row = i % MASK_ROWS
        paints[row * MASK_COLS + col] = nibble % 2 == 0
    return tuple(paints)


def derive_appearance(digest: bytes) -> tuple[RGBColor, PaintMask]:
    """Return ``(foreground, mask)``; a pure function of *digest*."""
    return derive_foreground(digest), derive_mask(digest)
