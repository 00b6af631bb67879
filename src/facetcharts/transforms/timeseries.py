# src/facetcharts/transforms/timeseries.py
"""
Time-series shaped transformers.

timeseries_bar_rows
    Row-pivot over (facet1, facet2) where both facets are required, plus one
    display color per facet2 derived by inverting the record's color hint.

pivot_timeseries
    Uses every data point of every series (not only data[0]): one row per
    x value, one column per series name.

        {"rows": [{"x": x, "values": {series_name: y, ...}}, ...],
         "series_keys": [series_name, ...],
         "y_axis_label": str}
"""

from __future__ import annotations

import numbers
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

import pandas as pd

from facetcharts.colors.contrast import invert_color
from facetcharts.colors.themes import resolve_theme
from .ordering import sort_category_keys
from .pivot import pivot_facets
from .series import MalformedSeriesError, coerce_faceted_series, normalize_faceted_series, y_axis_label


def timeseries_bar_rows(
    raw: Iterable[Any],
    *,
    color_theme: Optional[str] = None,
    themes: Optional[Mapping[str, Sequence[str]]] = None,
) -> Dict[str, Any]:
    """
    Row-pivot payload plus `series_colors` {facet2: '#rrggbb'}.

    A facet2 takes the inverse of the color hint of its last record. Keys
    without any hint get the theme color at their column position.
    """
    raw = list(raw)
    facets = normalize_faceted_series(raw, require_facets=True)
    rows, column_keys = pivot_facets(facets)

    hinted = {
        key: invert_color(color)
        for key, color in zip(facets["facet2"], facets["color"])
        if pd.notna(color)
    }
    theme_colors = resolve_theme(color_theme, themes)

    series_colors = {
        key: hinted.get(key, theme_colors[i % len(theme_colors)])
        for i, key in enumerate(column_keys)
    }
    return {
        "rows": rows,
        "column_keys": column_keys,
        "y_axis_label": y_axis_label(raw),
        "series_colors": series_colors,
    }


def _sorted_x(values):
    if all(isinstance(v, numbers.Real) for v in values):
        return sorted(values)
    return sort_category_keys(str(v) for v in values)


def pivot_timeseries(raw: Iterable[Any]) -> Dict[str, Any]:
    """
    One row per distinct x, ordered ascending (numeric timestamps) or in
    category order (string buckets). Duplicate (x, series) points: last wins.
    """
    raw = list(raw)
    series = [s for s in coerce_faceted_series(raw) if not s.is_sentinel()]

    records = []
    for s in series:
        for p in s.data:
            if p.x is None:
                raise MalformedSeriesError(f"Series {s.metadata.name!r} has a data point without x")
            records.append((p.x, s.metadata.name, p.y))

    df = pd.DataFrame.from_records(records, columns=["x", "series", "y"])
    series_keys = list(dict.fromkeys(df["series"]))
    if len(df) == 0:
        return {"rows": [], "series_keys": series_keys, "y_axis_label": y_axis_label(raw)}

    if not all(isinstance(v, numbers.Real) for v in df["x"]):
        df["x"] = df["x"].astype(str)

    # later points overwrite earlier ones
    lookup = {(x, s): float(y) for x, s, y in zip(df["x"].tolist(), df["series"], df["y"])}
    xs = _sorted_x(list(dict.fromkeys(df["x"].tolist())))

    rows = [
        {"x": x, "values": {k: lookup[(x, k)] for k in series_keys if (x, k) in lookup}}
        for x in xs
    ]
    return {"rows": rows, "series_keys": series_keys, "y_axis_label": y_axis_label(raw)}
