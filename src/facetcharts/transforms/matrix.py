# src/facetcharts/transforms/matrix.py
"""
Matrix pivot for heatmaps.

    facets_df ['facet1','facet2','value']  ->  {"z": [[...]], "x": [facet2...], "y": [facet1...]}

- y labels: distinct facet1 values in first-seen order
- x labels: distinct facet2 values in first-seen order
- z[i][j] is the value of (y[i], x[j]); absent combinations are 0.0
- for duplicate (facet1, facet2) records the FIRST value is used

No ordering is applied here; order_weekday_columns() is the caller-side
reordering used when the columns are weekdays.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

import pandas as pd

from .ordering import WEEKDAY, classify_category_key, sort_category_keys
from .series import normalize_faceted_series, x_axis_label, y_axis_label


def matrix_from_facets(facets_df: pd.DataFrame) -> Dict[str, Any]:
    y = list(dict.fromkeys(facets_df["facet1"]))
    x = list(dict.fromkeys(facets_df["facet2"]))
    if len(y) == 0:
        return {"z": [], "x": [], "y": []}

    cells = facets_df.drop_duplicates(subset=["facet1", "facet2"], keep="first")
    z = (
        cells.pivot(index="facet1", columns="facet2", values="value")
        .reindex(index=y, columns=x)
        .fillna(0.0)
        .astype("float64")
    )
    return {"z": z.to_numpy().tolist(), "x": x, "y": y}


def build_matrix(raw: Iterable[Any]) -> Dict[str, Any]:
    """
    Dense heatmap matrix with axis labels.

    `value_label` names the cell measure (groups[0]), `y_axis_label` the
    facet1 dimension (groups[1]).
    """
    raw = list(raw)
    out = matrix_from_facets(normalize_faceted_series(raw))
    out["value_label"] = y_axis_label(raw)
    out["y_axis_label"] = x_axis_label(raw)
    return out


def order_weekday_columns(matrix: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Reorder the columns Sunday -> Saturday when any x label is a weekday.

    Labels and matrix columns move together. Non-weekday labels keep their
    relative order ahead of the weekdays. Matrices without weekday columns
    are returned unchanged.
    """
    x = list(matrix["x"])
    out = dict(matrix)
    if not any(classify_category_key(label) == WEEKDAY for label in x):
        return out

    ordered = sort_category_keys(x)
    pos = {label: i for i, label in enumerate(x)}
    perm = [pos[label] for label in ordered]

    out["x"] = ordered
    out["z"] = [[row[j] for j in perm] for row in matrix["z"]]
    return out
