# src/facetcharts/colors/__init__.py
"""
Color utilities for facetcharts.

Public API
----------
- hex_to_rgb, rgb_to_hex, invert_color, InvalidColorError
- DEFAULT_THEME, DISCRETE_THEMES, resolve_theme, assign_colors, cycle_colors
"""

from .contrast import InvalidColorError, hex_to_rgb, invert_color, rgb_to_hex
from .themes import DEFAULT_THEME, DISCRETE_THEMES, assign_colors, cycle_colors, resolve_theme

__all__ = [
    "InvalidColorError",
    "hex_to_rgb",
    "invert_color",
    "rgb_to_hex",
    "DEFAULT_THEME",
    "DISCRETE_THEMES",
    "assign_colors",
    "cycle_colors",
    "resolve_theme",
]
