# src/facetcharts/transforms/graph.py
"""
Weighted directed edges for Sankey diagrams.

Each non-sentinel record contributes one edge facet1 -> facet2 with weight
data[0].y. Both facets are required. Node indices are assigned in
first-seen order while walking the records (source before target), so the
node set is 0..N-1 with no duplicate labels. Parallel edges are kept as
separate links.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

import numpy as np
import pandas as pd

from .series import normalize_faceted_series


def sankey_from_facets(facets_df: pd.DataFrame) -> Dict[str, Any]:
    src = facets_df["facet1"].to_numpy(dtype=object)
    dst = facets_df["facet2"].to_numpy(dtype=object)

    # interleave source/target so first-seen order follows record order
    labels = list(dict.fromkeys(np.column_stack([src, dst]).ravel().tolist()))
    index = {label: i for i, label in enumerate(labels)}

    links = [
        {"source": index[s], "target": index[t], "value": float(v)}
        for s, t, v in zip(src, dst, facets_df["value"])
    ]
    return {"nodes": [{"label": label} for label in labels], "links": links}


def build_sankey(raw: Iterable[Any]) -> Dict[str, Any]:
    return sankey_from_facets(normalize_faceted_series(raw, require_facets=True))
