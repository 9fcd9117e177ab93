"""Expand a paint mask into the full identicon pixel buffer.

The image is a 7×7 grid of ``size``-pixel cells.  Mask index ``i`` addresses
the cell at row ``1 + i // 3`` and column ``1 + i % 3``.  This row-major
numbering is not the column-major one used to fill the mask; both are part
of the visual contract.  Every painted cell is mirrored across the vertical
axis, and the outer ring of cells stays background.
"""

from __future__ import annotations

from collections.abc import Sequence

from PIL import Image

from identiconctl.domain.appearance import MASK_SIZE, NUM_SQUARES
from identiconctl.domain.color import RGBColor
from identiconctl.domain.errors import ImageTooLargeError

# Pillow stores image dimensions as signed 32-bit C ints.
PILLOW_MAX_DIMENSION = 2**31 - 1
MAX_SIZE = PILLOW_MAX_DIMENSION // NUM_SQUARES


def image_side(size: int) -> int:
    """Side length in pixels of an identicon with *size*-pixel cells."""
    return size * NUM_SQUARES


def validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        msg = f"size must be an integer, got {type(size).__name__}"
        raise TypeError(msg)
    if not 1 <= size <= MAX_SIZE:
        msg = f"size must be between 1 and {MAX_SIZE}, got {size}"
        raise ValueError(msg)
    return size


def composite(
    paints: Sequence[bool],
    size: int,
    foreground: RGBColor,
    background: RGBColor,
) -> Image.Image:
    """Build a fresh RGB image from the mask and colors."""
    if len(paints) != MASK_SIZE:
        msg = f"Paint mask must have {MASK_SIZE} cells, got {len(paints)}"
        raise ValueError(msg)
    validate_size(size)

    side = image_side(size)
    try:
        img = Image.new("RGB", (side, side), background.as_pixel())
    except (OverflowError, MemoryError) as exc:
        raise ImageTooLargeError(size, side, str(exc) or type(exc).__name__) from exc
    fill = foreground.as_pixel()
    num_center_cols = NUM_SQUARES // 2

    for i, paint in enumerate(paints):
        if not paint:
            continue
        row = 1 + i // num_center_cols
        col = 1 + i % num_center_cols
        x0 = col * size
        y0 = row * size
        img.paste(fill, (x0, y0, x0 + size, y0 + size))
        # Mirror of x in [x0, x0+size) is side-1-x, i.e. [side-x0-size, side-x0).
        img.paste(fill, (side - x0 - size, y0, side - x0, y0 + size))

    return img
