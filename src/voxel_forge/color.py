"""
Color Helpers

Handles:
- Hex color parsing and formatting ("#RRGGBB")
- Shading (lighten/darken) for derived detail colors
- Conversion of hex color lists to numpy RGBA arrays

Models store colors as hex strings; arrays are only built on request.
"""

import re
from typing import Iterable, Tuple
import numpy as np


WHITE = "#FFFFFF"
BLACK = "#000000"

_HEX_PATTERN = re.compile(r"^#([0-9A-Fa-f]{6})$")


def is_hex_color(value: str) -> bool:
    """Check that value is a "#RRGGBB" string."""
    return isinstance(value, str) and _HEX_PATTERN.match(value) is not None


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """
    Parse a "#RRGGBB" string.

    Args:
        value: Hex color string

    Returns:
        (r, g, b) tuple with 0-255 components
    """
    match = _HEX_PATTERN.match(value) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 0-255 components as an uppercase "#RRGGBB" string."""
    r = max(0, min(255, int(r)))
    g = max(0, min(255, int(g)))
    b = max(0, min(255, int(b)))
    return f"#{r:02X}{g:02X}{b:02X}"


def shade(value: str, factor: float) -> str:
    """
    Lighten or darken a color.

    Args:
        value: Hex color string
        factor: < 1.0 darkens toward black, > 1.0 lightens toward white

    Returns:
        New hex color string
    """
    r, g, b = hex_to_rgb(value)
    if factor <= 1.0:
        return rgb_to_hex(round(r * factor), round(g * factor), round(b * factor))
    # Lighten by blending toward white
    t = min(factor - 1.0, 1.0)
    return rgb_to_hex(
        round(r + (255 - r) * t),
        round(g + (255 - g) * t),
        round(b + (255 - b) * t),
    )


def hex_colors_to_rgba(colors: Iterable[str]) -> np.ndarray:
    """
    Convert hex strings to an RGBA array.

    Args:
        colors: Iterable of "#RRGGBB" strings

    Returns:
        Array of shape (N, 4), uint8, alpha = 255
    """
    cache = {}
    rows = []
    for value in colors:
        rgb = cache.get(value)
        if rgb is None:
            rgb = hex_to_rgb(value)
            cache[value] = rgb
        rows.append(rgb)

    result = np.full((len(rows), 4), 255, dtype=np.uint8)
    if rows:
        result[:, :3] = np.asarray(rows, dtype=np.uint8)
    return result
