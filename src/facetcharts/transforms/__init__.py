# src/facetcharts/transforms/__init__.py
"""
Transformations for facetcharts.

This subpackage turns raw faceted query results (see series.py) into the
input shapes chart renderers expect.

Design principles:
- Every transformer is a pure function of its raw input (plus, for colored
  outputs, an injected theme lookup). No state survives a call.
- Outputs are plain dicts/lists/floats/strings, directly serializable and
  snapshot-testable.
- Category ordering, sentinel filtering and zero-total handling are defined
  once (ordering.py, series.py, config.py) and shared by all transformers.

Public API:
- pivot_rows, percentage_rows, cumulative_rows, pivot_series_columns
- build_matrix, order_weekday_columns
- rank_categories, horizontal_ranking, pareto
- build_sankey
- timeseries_bar_rows, pivot_timeseries
- normalize_faceted_series, decode_faceted_series, coerce_faceted_series
- compare_category_keys, sort_category_keys
"""

from .graph import build_sankey
from .matrix import build_matrix, order_weekday_columns
from .ordering import CategoryOrderError, compare_category_keys, sort_category_keys
from .pivot import cumulative_rows, percentage_rows, pivot_rows, pivot_series_columns
from .ranked import horizontal_ranking, pareto, rank_categories
from .series import (
    FacetedSeries,
    MalformedSeriesError,
    coerce_faceted_series,
    decode_faceted_series,
    normalize_faceted_series,
)
from .timeseries import pivot_timeseries, timeseries_bar_rows

__all__ = [
    "build_sankey",
    "build_matrix",
    "order_weekday_columns",
    "CategoryOrderError",
    "compare_category_keys",
    "sort_category_keys",
    "cumulative_rows",
    "percentage_rows",
    "pivot_rows",
    "pivot_series_columns",
    "horizontal_ranking",
    "pareto",
    "rank_categories",
    "FacetedSeries",
    "MalformedSeriesError",
    "coerce_faceted_series",
    "decode_faceted_series",
    "normalize_faceted_series",
    "pivot_timeseries",
    "timeseries_bar_rows",
]
