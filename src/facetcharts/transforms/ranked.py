# src/facetcharts/transforms/ranked.py
"""
Single-facet ranked lists for vertical bar, horizontal bar and Pareto charts.

Rows are {"name": facet1, "value": float}, sorted by value descending.
Ties keep the order in which the categories first appeared. Duplicate
categories are collapsed with the last value winning.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import numpy as np
import pandas as pd

from facetcharts.transforms import config
from .series import normalize_faceted_series, x_axis_label, y_axis_label


def rank_facets(facets_df: pd.DataFrame) -> pd.DataFrame:
    """Return ['name','value'] sorted descending by value (stable)."""
    df = (
        facets_df.groupby("facet1", sort=False)["value"]
        .last()
        .reset_index()
        .rename(columns={"facet1": "name"})
    )
    # negate + mergesort: stable descending order
    df["_key"] = -df["value"]
    return df.sort_values("_key", kind="mergesort").drop(columns="_key").reset_index(drop=True)


def _records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    return [{"name": n, "value": float(v)} for n, v in zip(df["name"], df["value"])]


def rank_categories(raw: Iterable[Any]) -> Dict[str, Any]:
    raw = list(raw)
    ranked = rank_facets(normalize_faceted_series(raw))
    return {
        "rows": _records(ranked),
        "value_label": y_axis_label(raw),
        "category_label": x_axis_label(raw),
    }


def horizontal_ranking(raw: Iterable[Any]) -> Dict[str, Any]:
    """
    Ranked rows in ascending order: horizontal bar renderers draw the first
    category at the bottom, so the largest bar ends up on top.
    """
    out = rank_categories(raw)
    out["rows"] = out["rows"][::-1]
    return out


def pareto(raw: Iterable[Any]) -> Dict[str, Any]:
    """
    Ranked rows plus the cumulative percentage line.

    cumulative_percentage[i] is the running sum of value/grand_total*100 over
    the first i+1 ranked rows; it ends at 100 for a positive grand total.
    A zero grand total yields 0.0 everywhere.
    """
    out = rank_categories(raw)
    values = np.array([r["value"] for r in out["rows"]], dtype="float64")
    grand_total = float(values.sum())

    if grand_total != 0:
        cumulative = np.cumsum(values / grand_total * config.PERCENT_TOTAL)
    else:
        cumulative = np.zeros_like(values)

    out["grand_total"] = grand_total
    out["cumulative_percentage"] = cumulative.tolist()
    return out
