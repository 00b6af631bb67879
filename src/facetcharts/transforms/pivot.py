# src/facetcharts/transforms/pivot.py
"""
Row-pivot family of transformers (grouped bar, 100% stacked bar, cumulative sum).

All three produce the same payload shape:

    {"rows": [{"name": facet1, "values": {facet2: float, ...}}, ...],
     "column_keys": [facet2, ...],
     "y_axis_label": str}

- rows are ordered by `name` in category order (see ordering.py)
- column_keys is the union of all facet2 keys in category order
- each row's `values` iterates in column_keys order

Policy
------
- Several records with the same (facet1, facet2) overwrite each other:
  the value of the LAST record wins, the key keeps the position of the
  FIRST one.
- A row missing a column key means 0 for pivot/percentage rows and
  "unchanged since the previous row" for cumulative rows.
- A percentage row whose total is 0 gets 0.0 for every share.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Tuple

import numpy as np
import pandas as pd

from facetcharts.transforms import config
from .ordering import sort_category_keys
from .series import normalize_faceted_series, y_axis_label


def _pivot_long(facets_df: pd.DataFrame) -> pd.DataFrame:
    """Collapse duplicate (facet1, facet2) pairs: first position, last value."""
    if len(facets_df) == 0:
        return pd.DataFrame({"facet1": [], "facet2": [], "value": []}).astype({"value": "float64"})
    return (
        facets_df.groupby(["facet1", "facet2"], sort=False)["value"]
        .last()
        .reset_index()
    )


def _order_keys(long_df: pd.DataFrame) -> Tuple[List[str], List[str]]:
    """Return (row names, column keys), both in category order."""
    names = sort_category_keys(dict.fromkeys(long_df["facet1"]))

    per_name = {name: g["facet2"].tolist() for name, g in long_df.groupby("facet1", sort=False)}
    flat = [key for name in names for key in per_name[name]]
    column_keys = sort_category_keys(dict.fromkeys(flat))
    return names, column_keys


def _rows_payload(long_df: pd.DataFrame, value_col: str) -> Tuple[List[Dict[str, Any]], List[str]]:
    names, column_keys = _order_keys(long_df)
    lookup = {
        (f1, f2): float(v)
        for f1, f2, v in long_df[["facet1", "facet2", value_col]].itertuples(index=False)
    }

    rows = [
        {
            "name": name,
            "values": {key: lookup[(name, key)] for key in column_keys if (name, key) in lookup},
        }
        for name in names
    ]
    return rows, column_keys


def pivot_facets(facets_df: pd.DataFrame) -> Tuple[List[Dict[str, Any]], List[str]]:
    """Row-pivot an already normalized facets DataFrame. Returns (rows, column_keys)."""
    return _rows_payload(_pivot_long(facets_df), "value")


def pivot_rows(raw: Iterable[Any], *, require_facets: bool = False) -> Dict[str, Any]:
    """
    One row per facet1, one column per facet2 (grouped and stacked bars).
    """
    raw = list(raw)
    rows, column_keys = pivot_facets(normalize_faceted_series(raw, require_facets=require_facets))
    return {"rows": rows, "column_keys": column_keys, "y_axis_label": y_axis_label(raw)}


def percentage_rows(raw: Iterable[Any]) -> Dict[str, Any]:
    """
    Row-pivot with every row normalized to sum to 100.

    The total of a row is the sum of its retained (post-overwrite) values,
    so every row with a non-zero total sums to 100.
    """
    raw = list(raw)
    long_df = _pivot_long(normalize_faceted_series(raw))

    total = long_df.groupby("facet1", sort=False)["value"].transform("sum").to_numpy(dtype="float64")
    value = long_df["value"].to_numpy(dtype="float64")

    # zero total -> zero share (no inf/nan)
    safe_total = np.where(total != 0, total, 1.0)
    long_df["share"] = np.where(total != 0, value / safe_total * config.PERCENT_TOTAL, 0.0)

    rows, column_keys = _rows_payload(long_df, "share")
    return {"rows": rows, "column_keys": column_keys, "y_axis_label": y_axis_label(raw)}


def cumulative_rows(pivot: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Running total per column over row-pivoted rows.

    Input is the payload of pivot_rows(). Rows are re-sorted by name; each
    column accumulates only where the row has a value, and rows without a
    value for a column carry the previous row's running total forward
    (0 before the first value). Every output row has every column key.
    """
    in_rows = list(pivot["rows"])
    column_keys = list(pivot.get("column_keys") or dict.fromkeys(k for r in in_rows for k in r["values"]))

    by_name = {r["name"]: r for r in in_rows}
    if len(by_name) != len(in_rows):
        raise ValueError("cumulative_rows requires unique row names")

    names = sort_category_keys(by_name)
    if len(names) == 0:
        return {"rows": [], "column_keys": column_keys, "y_axis_label": pivot.get("y_axis_label")}

    wide = pd.DataFrame(
        [by_name[n]["values"] for n in names],
        index=names,
        columns=column_keys,
        dtype="float64",
    )

    # cumsum keeps NaN where the row had no value; ffill then carries forward
    cum = wide.cumsum(skipna=True).ffill().fillna(0.0)

    rows = [
        {"name": name, "values": {k: float(v) for k, v in zip(column_keys, values)}}
        for name, values in zip(names, cum.to_numpy())
    ]
    return {"rows": rows, "column_keys": column_keys, "y_axis_label": pivot.get("y_axis_label")}


def pivot_series_columns(payload: Mapping[str, Any]) -> Dict[str, List[float]]:
    """
    Column-major view of a row payload: {column_key: [value per row]}, with
    0.0 for rows missing the key. This is the per-trace shape chart
    renderers consume.
    """
    rows = payload["rows"]
    return {key: [r["values"].get(key, 0.0) for r in rows] for key in payload["column_keys"]}
