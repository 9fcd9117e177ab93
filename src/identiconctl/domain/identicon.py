"""The Identicon value: everything needed to draw one, derived once from a name.

INVARIANT: An Identicon never changes after construction.  Every call to
``image()``, ``encode()`` or ``render()`` rebuilds the pixel buffer from the
same fields, so repeated calls produce identical output.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from identiconctl.domain.appearance import MASK_SIZE, PaintMask, derive_appearance
from identiconctl.domain.color import RGBColor
from identiconctl.domain.compositor import composite, image_side, validate_size
from identiconctl.domain.digest import compute_digest
from identiconctl.domain.types import ImageFormat

if TYPE_CHECKING:
    from PIL import Image

DEFAULT_SIZE = 60
DEFAULT_BACKGROUND = RGBColor(240, 240, 240)


@dataclass(frozen=True)
class Identicon:
    """Paint mask, cell size and colors of a single identicon.

    Attributes:
        paints: 15-cell mask over the left-and-center half grid.
        size: Pixels per grid cell; the image side is ``size * 7``.
        foreground: Color derived from the name digest.
        background: Caller-chosen fill color.
    """

    paints: PaintMask
    size: int
    foreground: RGBColor
    background: RGBColor

    def __post_init__(self) -> None:
        if len(self.paints) != MASK_SIZE:
            msg = f"Paint mask must have {MASK_SIZE} cells, got {len(self.paints)}"
            raise ValueError(msg)
        validate_size(self.size)

    @classmethod
    def create(
        cls,
        name: str,
        size: int = DEFAULT_SIZE,
        background: RGBColor = DEFAULT_BACKGROUND,
    ) -> Identicon:
        """Derive an identicon from *name*.

        Raises:
            ValueError: *size* is outside ``[1, MAX_SIZE]``.
            HSLOutOfRangeError: the derived foreground left its HSL domain.
        """
        validate_size(size)
        foreground, paints = derive_appearance(compute_digest(name))
        return cls(paints=paints, size=size, foreground=foreground, background=background)

    @property
    def side(self) -> int:
        return image_side(self.size)

    def image(self) -> Image.Image:
        """Build a fresh pixel buffer."""
        return composite(self.paints, self.size, self.foreground, self.background)

    def to_bytes(self, fmt: ImageFormat) -> bytes:
        """Serialize the image in *fmt*."""
        from identiconctl.infrastructure.codec import encode_image

        return encode_image(self.image(), fmt)

    def encode(self, fmt: ImageFormat) -> str:
        """Serialize the image in *fmt* and return it as base64 text."""
        from identiconctl.domain.base64 import encode

        return encode(self.to_bytes(fmt))

    def png(self) -> str:
        return self.encode(ImageFormat.PNG)

    def jpeg(self) -> str:
        return self.encode(ImageFormat.JPEG)

    def gif(self) -> str:
        return self.encode(ImageFormat.GIF)

    def render(self, path: Path) -> ImageFormat:
        """Write the image to *path*, inferring the format from its extension.

        The file is replaced atomically; on failure *path* is left untouched.
        Returns the format that was written.
        """
        from identiconctl.infrastructure.codec import save_image

        fmt = ImageFormat.from_path(path)
        save_image(self.image(), path, fmt)
        return fmt
