# src/facetcharts/colors/themes.py
"""
Discrete color themes.

A theme lookup is a mapping from theme name to an ordered sequence of
colors. Callers may inject their own lookup; DISCRETE_THEMES (plotly's
qualitative palettes) is the default one.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from plotly.colors import qualitative as q


# Theme used when the requested color theme is not registered
DEFAULT_THEME = "Plotly"

DISCRETE_THEMES: Dict[str, List[str]] = {
    "Plotly": list(q.Plotly),
    "D3": list(q.D3),
    "G10": list(q.G10),
    "T10": list(q.T10),
}


def _usable(colors) -> bool:
    return isinstance(colors, Sequence) and not isinstance(colors, str) and len(colors) > 0


def resolve_theme(name: Optional[str], themes: Optional[Mapping[str, Sequence[str]]] = None) -> List[str]:
    """
    Colors of theme `name`.

    Falls back to the default theme (DEFAULT_THEME) of the lookup when
    `name` is missing or not a non-empty color sequence, and to the
    built-in default theme when the lookup has no usable default either.
    """
    themes = DISCRETE_THEMES if themes is None else themes

    if name is not None and _usable(themes.get(name)):
        return list(themes[name])
    if _usable(themes.get(DEFAULT_THEME)):
        return list(themes[DEFAULT_THEME])
    return list(DISCRETE_THEMES[DEFAULT_THEME])


def assign_colors(keys: Iterable[str], colors: Sequence[str]) -> Dict[str, str]:
    """Map each key to a theme color, cycling through the theme."""
    return {key: colors[i % len(colors)] for i, key in enumerate(keys)}


def cycle_colors(n: int, colors: Sequence[str]) -> List[str]:
    """One color per position, cycling through the theme."""
    return [colors[i % len(colors)] for i in range(n)]
