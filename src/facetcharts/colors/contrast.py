# src/facetcharts/colors/contrast.py
"""
Hex color arithmetic used to derive contrasting series colors.

Colors are '#RRGGBB' strings ('#RGB' shorthand is expanded). Parsing and
formatting go through matplotlib.colors; anything that is not a hex color
raises InvalidColorError instead of producing a garbage color.
"""

from __future__ import annotations

from typing import Tuple

import matplotlib.colors as mpc


class InvalidColorError(ValueError):
    """Raised for malformed hex colors or out-of-range RGB channels."""


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    # named colors and alpha forms are valid for matplotlib but not here
    if not isinstance(color, str) or not color.startswith("#") or len(color) not in (4, 7):
        raise InvalidColorError(f"Expected a '#RRGGBB' hex color, got {color!r}")
    try:
        rgb = mpc.to_rgb(color)
    except ValueError as e:
        raise InvalidColorError(f"Expected a '#RRGGBB' hex color, got {color!r}") from e
    return tuple(int(round(c * 255)) for c in rgb)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    for channel in (r, g, b):
        if not isinstance(channel, int) or not 0 <= channel <= 255:
            raise InvalidColorError(f"RGB channels must be ints in [0, 255], got {(r, g, b)}")
    return mpc.to_hex((r / 255, g / 255, b / 255))


def invert_color(color: str) -> str:
    """Channel-wise inverse: '#000000' -> '#ffffff'. Output is lowercase."""
    r, g, b = hex_to_rgb(color)
    return rgb_to_hex(255 - r, 255 - g, 255 - b)
