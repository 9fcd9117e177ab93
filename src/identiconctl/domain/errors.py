"""Domain exceptions.

Each exception subclasses the builtin matching its failure kind, so callers
that only care about ``ValueError`` keep working.  The service layer maps
them onto ``ServiceError`` codes.
"""

from __future__ import annotations

from pathlib import Path


class InvalidColorStringError(ValueError):
    """A color string is not three comma-separated 0-255 integers."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid color=[{value}], expect format=[<u8>,<u8>,<u8>]")


class HSLOutOfRangeError(ValueError):
    """An HSL component lies outside ``[0, max]``."""

    def __init__(self, field: str, value: float, max_value: float) -> None:
        self.field = field
        self.value = value
        self.max = max_value
        super().__init__(f"expect {field} between 0.0 and {max_value} but found {value}")


class UnsupportedFormatError(ValueError):
    """The requested image format (or file extension) is not PNG, JPEG or GIF."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unsupported image format: {value!r} (expected png, jpeg or gif)")


class ImageTooLargeError(ValueError):
    """The pixel buffer for the requested cell size cannot be allocated."""

    def __init__(self, size: int, side: int, reason: str) -> None:
        self.size = size
        self.side = side
        self.reason = reason
        super().__init__(f"cannot allocate {side}x{side} image for size={size}: {reason}")


class ImageEncodingError(RuntimeError):
    """The image codec rejected the pixel buffer, or the output could not be written."""

    def __init__(self, fmt: str, reason: str, *, path: Path | None = None) -> None:
        self.format = fmt
        self.path = path
        self.reason = reason
        target = f" to {path}" if path is not None else ""
        super().__init__(f"encounter error saving {fmt} image{target}: {reason}")
