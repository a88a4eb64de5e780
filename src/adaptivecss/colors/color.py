"""
Color value type with parsing and formatting.

Colors are stored as 8-bit sRGB channels. Anything read from configuration goes
through `parse_color`; everything written to CSS goes through `Color.to_hex`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*[\d.]+%?\s*)?\)$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Color:
    """An opaque sRGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel value out of range: {channel}")

    @classmethod
    def from_unit_rgb(cls, r: float, g: float, b: float) -> Color:
        """Build a color from channels in the 0..1 range, clipping and rounding."""
        return cls(*(_quantize(c) for c in (r, g, b)))

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def unit_rgb(self) -> Tuple[float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.to_hex()


def _quantize(value: float) -> int:
    return int(round(min(1.0, max(0.0, float(value))) * 255))


def parse_color(value: str) -> Color:
    """
    Parse a CSS color string.

    Accepts `#rgb`, `#rrggbb`, `#rrggbbaa` (alpha is ignored, the theme only
    deals in opaque colors) and `rgb(r, g, b)`. The leading `#` is optional.

    Args:
        value: Color string from configuration or the command line

    Returns:
        Parsed Color

    Raises:
        ValueError: If the string is not a recognised color
    """
    if not isinstance(value, str):
        raise ValueError(f"Color must be a string: {value!r}")

    text = value.strip()

    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    match = _RGB_RE.match(text)
    if match:
        channels = [int(part) for part in match.groups()]
        if all(0 <= c <= 255 for c in channels):
            return Color(*channels)

    raise ValueError(f"Unrecognised color: {value!r}")


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


__all__ = ["Color", "parse_color", "WHITE", "BLACK"]
