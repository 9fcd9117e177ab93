"""Output image formats and extension inference."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from identiconctl.domain.errors import UnsupportedFormatError


class ImageFormat(StrEnum):
    """Image formats the codec can produce."""

    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"

    @classmethod
    def parse(cls, value: str) -> ImageFormat:
        """Case-insensitive lookup; ``jpg`` is accepted as an alias for JPEG."""
        key = value.strip().lower().lstrip(".")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedFormatError(value) from None

    @classmethod
    def from_path(cls, path: Path) -> ImageFormat:
        """Infer the format from a file extension."""
        if not path.suffix:
            raise UnsupportedFormatError(str(path))
        return cls.parse(path.suffix)

    @property
    def pillow_name(self) -> str:
        """Format name understood by ``PIL.Image.save``."""
        return self.value.upper()


_ALIASES: dict[str, str] = {"jpg": "jpeg"}
