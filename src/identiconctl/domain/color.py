"""HSL and RGB color values.

``HSLColor`` validates on construction and never clamps; ``to_rgb()`` uses
the six-region piecewise hue formula with half-up rounding so results match
the published identicon output byte for byte.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from identiconctl.domain.errors import HSLOutOfRangeError, InvalidColorStringError

HUE_MAX = 360
SAT_MAX = 100
LUM_MAX = 100
RGB_MAX = 255

COLOR_DELIMITER = ","


@dataclass(frozen=True)
class RGBColor:
    """Three 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= RGB_MAX:
                msg = f"{name} channel must be between 0 and {RGB_MAX}, got {value}"
                raise ValueError(msg)

    def as_pixel(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return f"{self.red},{self.green},{self.blue}"


@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees ``[0, 360]``; saturation and luminance in percent ``[0, 100]``."""

    hue: float
    sat: float
    lum: float

    def __post_init__(self) -> None:
        for field, value, max_value in (
            ("hue", self.hue, HUE_MAX),
            ("sat", self.sat, SAT_MAX),
            ("lum", self.lum, LUM_MAX),
        ):
            if not 0 <= value <= max_value:
                raise HSLOutOfRangeError(field, value, float(max_value))

    def to_rgb(self) -> RGBColor:
        hue = self.hue / HUE_MAX
        sat = self.sat / SAT_MAX
        lum = self.lum / LUM_MAX

        s = min(lum, 1.0 - lum)
        chroma = 2.0 * s * sat
        m = lum - chroma / 2.0

        return RGBColor(
            _to_byte(_channel(chroma, m, hue + 1.0 / 3.0)),
            _to_byte(_channel(chroma, m, hue)),
            _to_byte(_channel(chroma, m, hue - 1.0 / 3.0)),
        )


def _channel(chroma: float, m: float, h: float) -> float:
    """Evaluate one channel at normalized hue *h* (wrapped into ``[0, 1]``)."""
    if h < 0.0:
        h += 1.0
    elif h > 1.0:
        h -= 1.0

    if h < 1.0 / 6.0:
        return 6.0 * chroma * h + m
    if h < 1.0 / 2.0:
        return chroma + m
    if h < 2.0 / 3.0:
        return chroma * (4.0 - 6.0 * h) + m
    return m


def _to_byte(value: float) -> int:
    # Half-up: round() would round halves to even.
    return min(RGB_MAX, max(0, math.floor(value * RGB_MAX + 0.5)))


def parse_color(text: str) -> RGBColor:
    """Parse ``"r,g,b"`` into an :class:`RGBColor`.

    Exactly three fields, each an integer in ``[0, 255]``.  Surrounding
    whitespace per field is tolerated.

    Raises:
        InvalidColorStringError: wrong field count or a non-byte field.
    """
    parts = text.split(COLOR_DELIMITER)
    if len(parts) != 3:
        raise InvalidColorStringError(text)

    channels: list[int] = []
    for part in parts:
        part = part.strip()
        if not (part.isascii() and part.isdigit()):
            raise InvalidColorStringError(text)
        value = int(part)
        if value > RGB_MAX:
            raise InvalidColorStringError(text)
        channels.append(value)

    red, green, blue = channels
    return RGBColor(red, green, blue)
