# src/facetcharts/validation/checks.py
"""
Integrity checks ("emergency brake") for transformed visualization payloads.

These checks are intentionally strict and designed to catch a transformer
handing garbage to the renderer (duplicate rows, ragged matrices, shares
that do not add up, dangling node indices).

Raises AssertionError on failure; logs "<visualization> checks OK" otherwise.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

import numpy as np

from facetcharts.transforms import config


def _close(a: float, b: float) -> bool:
    return abs(a - b) <= config.PERCENT_TOLERANCE


def check_unique_names(rows) -> None:
    names = [r["name"] for r in rows]
    assert len(names) == len(set(names)), "Row names must be unique"


def check_row_payload(result: Mapping[str, Any]) -> None:
    rows = result["rows"]
    column_keys = result["column_keys"]
    check_unique_names(rows)

    assert len(column_keys) == len(set(column_keys)), "Column keys must be unique"
    keys = set(column_keys)
    for r in rows:
        extra = set(r["values"]) - keys
        assert not extra, f"Row {r['name']!r} has values for unknown columns: {sorted(extra)}"
        assert all(math.isfinite(v) for v in r["values"].values()), f"Row {r['name']!r} has non-finite values"


def check_percentage_rows(result: Mapping[str, Any]) -> None:
    check_row_payload(result)
    for r in result["rows"]:
        values = list(r["values"].values())
        total = math.fsum(values)
        assert _close(total, config.PERCENT_TOTAL) or all(v == 0 for v in values), (
            f"Percentages of row {r['name']!r} sum to {total}, expected {config.PERCENT_TOTAL}"
        )


def check_cumulative_rows(result: Mapping[str, Any]) -> None:
    check_row_payload(result)
    keys = list(result["column_keys"])
    for r in result["rows"]:
        assert list(r["values"]) == keys, f"Cumulative row {r['name']!r} is not fully populated"


def check_matrix(result: Mapping[str, Any]) -> None:
    z, x, y = result["z"], result["x"], result["y"]
    assert len(x) == len(set(x)), "Matrix x labels must be unique"
    assert len(y) == len(set(y)), "Matrix y labels must be unique"
    assert len(z) == len(y), f"Matrix has {len(z)} rows for {len(y)} y labels"
    for i, row in enumerate(z):
        assert len(row) == len(x), f"Matrix row {i} has {len(row)} cells for {len(x)} x labels"
    if len(z) > 0 and len(x) > 0:
        assert np.isfinite(np.asarray(z, dtype="float64")).all(), "Matrix has empty or non-finite cells"


def check_ranked(result: Mapping[str, Any], *, ascending: bool = False) -> None:
    rows = result["rows"]
    check_unique_names(rows)
    values = np.array([r["value"] for r in rows], dtype="float64")
    steps = np.diff(values)
    ok = (steps >= 0).all() if ascending else (steps <= 0).all()
    assert ok, f"Ranked values are not sorted {'ascending' if ascending else 'descending'}"


def check_pareto(result: Mapping[str, Any]) -> None:
    check_ranked(result)
    cumulative = result["cumulative_percentage"]
    assert len(cumulative) == len(result["rows"]), "One cumulative percentage per ranked row expected"
    if len(cumulative) > 0:
        expected = config.PERCENT_TOTAL if result["grand_total"] != 0 else 0.0
        assert _close(cumulative[-1], expected), (
            f"Cumulative percentage ends at {cumulative[-1]}, expected {expected}"
        )


def check_sankey(result: Mapping[str, Any], n_records: Optional[int] = None) -> None:
    """`n_records`: number of non-sentinel input records, one edge each."""
    labels = [n["label"] for n in result["nodes"]]
    assert len(labels) == len(set(labels)), "Sankey node labels must be unique"

    used = {link["source"] for link in result["links"]} | {link["target"] for link in result["links"]}
    assert used == set(range(len(labels))), "Sankey node indices must be contiguous 0..N-1"
    if n_records is not None:
        assert len(result["links"]) == n_records, (
            f"Sankey has {len(result['links'])} edges for {n_records} input records"
        )


_CHECKS = {
    "grouped_bar": check_row_payload,
    "stacked_bar_100": check_percentage_rows,
    "cumulative_sum": check_cumulative_rows,
    "heatmap": check_matrix,
    "vertical_bar": check_ranked,
    "horizontal_bar": lambda result: check_ranked(result, ascending=True),
    "pareto": check_pareto,
    "sankey": check_sankey,
    "timeseries_bar": check_row_payload,
}


def check_transformed(
    logger,
    visualization: str,
    result: Mapping[str, Any],
    n_records: Optional[int] = None,
) -> None:
    """
    Run the checks matching `visualization` on a transformed payload.
    Visualizations without dedicated checks only get logged.

    `n_records` (non-sentinel input records) enables the Sankey edge count
    check; other checks do not use it.
    """
    check = _CHECKS.get(visualization)
    if check is check_sankey:
        check(result, n_records=n_records)
    elif check is not None:
        check(result)
    logger.info(f"{visualization} checks OK")
