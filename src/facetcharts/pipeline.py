# src/facetcharts/pipeline.py
"""
Entry point mapping visualization names to their transformer chains.

The polling collaborator calls transform_visualization() once per data
refresh, after it has finished loading without error. Raw input may be the
JSON payload (bytes/str) or already-parsed records.

Visualizations
--------------
grouped_bar      row-pivot + per-column series
stacked_bar_100  percentage rows + theme color per column key
cumulative_sum   cumulative rows (every column populated)
heatmap          dense matrix, weekday columns reordered
vertical_bar     ranked rows (descending) + theme color per bar
horizontal_bar   ranked rows (ascending, largest on top) + theme color per bar
pareto           ranked rows + cumulative percentage
sankey           nodes/links + theme color per node
timeseries_bar   row-pivot + inverted hint color per column key
timeseries       one row per x over the full data sequence
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from facetcharts.colors.themes import assign_colors, cycle_colors, resolve_theme
from facetcharts.transforms.graph import build_sankey
from facetcharts.transforms.matrix import build_matrix, order_weekday_columns
from facetcharts.transforms.pivot import cumulative_rows, percentage_rows, pivot_rows, pivot_series_columns
from facetcharts.transforms.ranked import horizontal_ranking, pareto, rank_categories
from facetcharts.transforms.series import coerce_faceted_series, decode_faceted_series
from facetcharts.transforms.timeseries import pivot_timeseries, timeseries_bar_rows


def _grouped_bar(raw, color_theme, themes):
    out = pivot_rows(raw)
    out["series"] = pivot_series_columns(out)
    return out


def _stacked_bar_100(raw, color_theme, themes):
    out = percentage_rows(raw)
    out["series"] = pivot_series_columns(out)
    out["colors"] = assign_colors(out["column_keys"], resolve_theme(color_theme, themes))
    return out


def _cumulative_sum(raw, color_theme, themes):
    out = cumulative_rows(pivot_rows(raw))
    out["series"] = pivot_series_columns(out)
    return out


def _heatmap(raw, color_theme, themes):
    return order_weekday_columns(build_matrix(raw))


def _ranked_with_colors(ranker):
    def build(raw, color_theme, themes):
        out = ranker(raw)
        out["colors"] = cycle_colors(len(out["rows"]), resolve_theme(color_theme, themes))
        return out

    return build


def _pareto(raw, color_theme, themes):
    return pareto(raw)


def _sankey(raw, color_theme, themes):
    out = build_sankey(raw)
    out["node_colors"] = cycle_colors(len(out["nodes"]), resolve_theme(color_theme, themes))
    return out


def _timeseries_bar(raw, color_theme, themes):
    return timeseries_bar_rows(raw, color_theme=color_theme, themes=themes)


def _timeseries(raw, color_theme, themes):
    return pivot_timeseries(raw)


VISUALIZATIONS: Dict[str, Callable[..., Dict[str, Any]]] = {
    "grouped_bar": _grouped_bar,
    "stacked_bar_100": _stacked_bar_100,
    "cumulative_sum": _cumulative_sum,
    "heatmap": _heatmap,
    "vertical_bar": _ranked_with_colors(rank_categories),
    "horizontal_bar": _ranked_with_colors(horizontal_ranking),
    "pareto": _pareto,
    "sankey": _sankey,
    "timeseries_bar": _timeseries_bar,
    "timeseries": _timeseries,
}


def transform_visualization(
    logger,
    visualization: str,
    raw: Any,
    *,
    loading: bool = False,
    error: Any = None,
    color_theme: Optional[str] = None,
    themes: Optional[Mapping[str, Sequence[str]]] = None,
) -> Dict[str, Any]:
    """
    Transform one raw query result for `visualization`.

    Parameters
    ----------
    logger:
        logger instance
    visualization:
        one of VISUALIZATIONS
    raw:
        JSON payload (bytes/str) or iterable of records / FacetedSeries
    loading, error:
        state of the query collaborator; transforming while loading or
        after an error is refused with ValueError
    color_theme, themes:
        theme name and optional injected theme lookup

    Returns
    -------
    dict
        plain, serializable payload (see module docstring)
    """
    if visualization not in VISUALIZATIONS:
        raise ValueError(f"Unknown visualization {visualization!r}; expected one of {sorted(VISUALIZATIONS)}")
    if loading:
        raise ValueError("Query is still loading; nothing to transform")
    if error:
        raise ValueError(f"Query failed; refusing to transform: {error}")

    if isinstance(raw, (bytes, bytearray, str)):
        series = decode_faceted_series(bytes(raw) if isinstance(raw, bytearray) else raw)
    else:
        series = coerce_faceted_series(raw)

    n_sentinels = sum(1 for s in series if s.is_sentinel())
    logger.info(f"{visualization}: {len(series)} series received, {n_sentinels} sentinel series dropped")

    result = VISUALIZATIONS[visualization](series, color_theme, themes)

    n_out = len(result.get("rows", result.get("links", result.get("z", []))))
    logger.info(f"{visualization}: {n_out} rows produced")
    return result
