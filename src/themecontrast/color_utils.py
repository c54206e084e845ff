"""Color value type plus parsing and formatting utilities for themecontrast."""

import math
import numbers
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import colour
import numpy as np

from .errors import InvalidColorError

__all__ = [
    "Color",
    "parse_color",
    "color_to_hex",
    "format_color",
]

RGBA = tuple[float, float, float, float]


def _check_channel(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidColorError(
            f"Color channel '{name}' must be a number, got {value!r}", value
        )
    channel = float(value)
    if math.isnan(channel) or not 0.0 <= channel <= 1.0:
        raise InvalidColorError(
            f"Color channel '{name}' must be within [0, 1], got {value!r}", value
        )
    return channel


@dataclass(frozen=True)
class Color:
    """An sRGB color with normalized channels.

    Channels are floats in [0.0, 1.0]. Alpha is carried for formatting only;
    contrast math works on the opaque RGB projection.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, _check_channel(name, getattr(self, name)))

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        """Build a color from 8-bit channel values."""
        channels = (red, green, blue, alpha)
        for value in channels:
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidColorError(
                    f"8-bit channel must be an integer, got {value!r}", value
                )
            if not 0 <= value <= 255:
                raise InvalidColorError(
                    f"8-bit channel must be within [0, 255], got {value!r}", value
                )
        return cls(*(int(value) / 255.0 for value in channels))

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Build a color from ``#RRGGBB`` or ``#RRGGBBAA``."""
        rgba = parse_hex_color(hex_str) if isinstance(hex_str, str) else None
        if rgba is None:
            raise InvalidColorError(f"Invalid hex color: {hex_str!r}", hex_str)
        return cls(*rgba)

    @classmethod
    def parse(cls, color_str: str) -> "Color":
        return parse_color(color_str)

    @classmethod
    def coerce(cls, value: Any) -> "Color":
        """Convert a Color, color string or 3/4-sequence into a Color.

        Sequences are read as normalized channels; 8-bit values must go
        through :meth:`from_rgb255`.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return parse_color(value)
        if isinstance(value, (Sequence, np.ndarray)) and len(value) in (3, 4):
            return cls(*value)
        raise InvalidColorError(f"Cannot interpret {value!r} as a color", value)


_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{6}(?:[0-9A-Fa-f]{2})?")


def parse_hex_color(color_str: str) -> RGBA | None:
    """Parse hexadecimal color format #RRGGBB or #RRGGBBAA."""
    color_str = color_str.strip()
    if not color_str.startswith("#"):
        return None

    hex_str = color_str[1:]
    # int(..., 16) alone would accept signs and inner whitespace
    if not _HEX_DIGITS.fullmatch(hex_str):
        return None
    if len(hex_str) == 6:
        hex_str += "FF"

    r, g, b, a = (int(hex_str[i : i + 2], 16) / 255.0 for i in range(0, 8, 2))
    return (r, g, b, a)


def parse_rgb_color(color_str: str) -> RGBA | None:
    """Parse RGB color format rgb(R, G, B) or rgba(R, G, B, A)."""
    pattern = (
        r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*"
        r"(?:,\s*(\d+(?:\.\d+)?)\s*)?\)$"
    )
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    try:
        r = int(match.group(1))
        g = int(match.group(2))
        b = int(match.group(3))
        a = float(match.group(4)) if match.group(4) is not None else 1.0

        if not all(0 <= val <= 255 for val in [r, g, b]) or not 0.0 <= a <= 1.0:
            return None

        return (r / 255.0, g / 255.0, b / 255.0, a)
    except ValueError:
        return None


_CYLINDRICAL_PATTERN = (
    r"{prefix}\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*"
    r"(\d+(?:\.\d+)?)\s*%\s*,\s*(\d+(?:\.\d+)?)\s*%\s*\)$"
)

# Function name prefix -> colour-science conversion to RGB
_CYLINDRICAL_MODELS = {
    "hsl": colour.models.rgb.cylindrical.HSL_to_RGB,
    "hsv": colour.models.rgb.cylindrical.HSV_to_RGB,
}


def _parse_cylindrical_color(prefix: str, color_str: str) -> RGBA | None:
    """Parse ``prefix(H, A%, B%)`` and convert it to opaque RGBA."""
    match = re.match(
        _CYLINDRICAL_PATTERN.format(prefix=prefix), color_str.strip(), re.IGNORECASE
    )
    if not match:
        return None

    hue, second, third = (float(group) for group in match.groups())
    if not (hue <= 360 and second <= 100 and third <= 100):
        return None

    rgb = _CYLINDRICAL_MODELS[prefix](np.array([hue / 360, second / 100, third / 100]))
    r, g, b = np.clip(rgb, 0.0, 1.0)
    return (float(r), float(g), float(b), 1.0)


def parse_hsl_color(color_str: str) -> RGBA | None:
    """Parse HSL color format hsl(H, S%, L%)."""
    return _parse_cylindrical_color("hsl", color_str)


def parse_hsv_color(color_str: str) -> RGBA | None:
    """Parse HSV color format hsv(H, S%, V%)."""
    return _parse_cylindrical_color("hsv", color_str)


def parse_color(color_str: str) -> Color:
    """Parse color string in various formats."""
    if not isinstance(color_str, str):
        raise InvalidColorError(f"Expected a color string, got {color_str!r}", color_str)
    color_str = color_str.strip()

    # Try each format
    parsers = [parse_hex_color, parse_rgb_color, parse_hsl_color, parse_hsv_color]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return Color(*result)

    raise InvalidColorError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RRGGBB, #RRGGBBAA, rgb(R,G,B), rgba(R,G,B,A), "
        "hsl(H,S%,L%), hsv(H,S%,V%)",
        color_str,
    )


def _to_byte(channel: float) -> int:
    return int(round(channel * 255))


def color_to_hex(color: Color) -> str:
    """Format a color as ``#RRGGBBAA`` (uppercase, alpha included)."""
    return "#" + "".join(
        f"{_to_byte(c):02X}" for c in (color.red, color.green, color.blue, color.alpha)
    )


def format_color(color: Color, format_type: str = "hex") -> str:
    """Format a color for output."""
    if format_type == "hex":
        return color_to_hex(color)
    if format_type == "rgb":
        r, g, b = (_to_byte(c) for c in color.rgb)
        return f"rgb({r}, {g}, {b})"
    # raw
    return f"({color.red:.4f}, {color.green:.4f}, {color.blue:.4f}, {color.alpha:.4f})"
