# src/facetcharts/transforms/series.py
"""
Decoding and normalization of raw faceted query results.

The query engine returns one record per distinct facet combination:

    {"metadata": {"name": str,
                  "groups": [{"displayName": ...},          # measure (y axis)
                             {"value": ..., "displayName": ...},   # facet 1
                             {"value": ..., "displayName": ...}],  # facet 2
                  "color": "#rrggbb"},
     "data": [{"x": ..., "y": number}, ...]}

This module:
- Builds msgspec structures for that payload (unknown fields are ignored)
- Validates the parts every transformer relies on
- Flattens the records into a long DataFrame:

    facets_df: ['name','facet1','facet2','value','color']

  with sentinel records ("Other", "Daylight saving time") removed.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional, Union

import msgspec
import pandas as pd

from facetcharts.transforms import config


FACET_COLUMNS = ["name", "facet1", "facet2", "value", "color"]


class MalformedSeriesError(ValueError):
    """Raised when a raw faceted series does not satisfy the input contract."""


# -----------------------------
# msgspec structures
# -----------------------------

class Group(msgspec.Struct, rename="camel"):
    value: Optional[Union[str, int, float]] = None
    display_name: Optional[str] = None


class Metadata(msgspec.Struct):
    name: str = ""
    groups: List[Group] = msgspec.field(default_factory=list)
    color: Optional[str] = None


class Point(msgspec.Struct):
    y: float
    x: Optional[Union[int, float, str]] = None


class FacetedSeries(msgspec.Struct):
    metadata: Metadata
    data: List[Point]

    def is_sentinel(self) -> bool:
        return self.metadata.name in config.SENTINEL_SERIES_NAMES

    def facet(self, index: int, required: bool = False) -> str:
        """
        Value of groups[index] as a string.

        Absent groups (or groups without a value) become "unknown" unless
        `required` is set, in which case MalformedSeriesError is raised.
        """
        groups = self.metadata.groups
        value = groups[index].value if index < len(groups) else None
        if value is None:
            if required:
                raise MalformedSeriesError(
                    f"Series {self.metadata.name!r} has no value for facet group {index}"
                )
            return config.UNKNOWN_FACET
        return _facet_str(value)


_DECODER = msgspec.json.Decoder(List[FacetedSeries])


def _facet_str(value: Union[str, int, float]) -> str:
    # 3.0 -> "3", matching how numeric facets are printed by the query engine
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _validate(series: List[FacetedSeries]) -> List[FacetedSeries]:
    for i, s in enumerate(series):
        if len(s.metadata.groups) == 0:
            raise MalformedSeriesError(f"Series #{i} ({s.metadata.name!r}) has no measure group (groups[0])")
        if len(s.data) == 0:
            raise MalformedSeriesError(f"Series #{i} ({s.metadata.name!r}) has no data points")
        bad = [p.y for p in s.data if not math.isfinite(p.y)]
        if bad:
            raise MalformedSeriesError(f"Series #{i} ({s.metadata.name!r}) has non-finite y values: {bad}")
    return series


def decode_faceted_series(payload: Union[bytes, str]) -> List[FacetedSeries]:
    """Decode a JSON payload (list of records) into validated FacetedSeries."""
    try:
        series = _DECODER.decode(payload)
    except (msgspec.ValidationError, msgspec.DecodeError) as e:
        raise MalformedSeriesError(f"Invalid faceted series payload: {e}") from e
    return _validate(series)


def coerce_faceted_series(raw: Iterable[Any]) -> List[FacetedSeries]:
    """
    Convert already-parsed records (dicts or FacetedSeries) into validated
    FacetedSeries.
    """
    raw = list(raw)
    if all(isinstance(r, FacetedSeries) for r in raw):
        return _validate(raw)
    try:
        series = msgspec.convert(raw, List[FacetedSeries])
    except msgspec.ValidationError as e:
        raise MalformedSeriesError(f"Invalid faceted series records: {e}") from e
    return _validate(series)


def normalize_faceted_series(raw: Iterable[Any], *, require_facets: bool = False) -> pd.DataFrame:
    """
    Flatten raw records into one row per non-sentinel record.

    Output
    ------
    DataFrame with columns ['name','facet1','facet2','value','color'], in
    record order. `value` is data[0].y (float64); `color` is the raw color
    hint or None.
    """
    series = coerce_faceted_series(raw)

    rows = [
        (
            s.metadata.name,
            s.facet(1, required=require_facets),
            s.facet(2, required=require_facets),
            s.data[0].y,
            s.metadata.color,
        )
        for s in series
        if not s.is_sentinel()
    ]

    df = pd.DataFrame.from_records(rows, columns=FACET_COLUMNS)
    df["value"] = pd.to_numeric(df["value"]).astype("float64")
    return df


def _group_label(raw: Iterable[Any], index: int, default: str) -> str:
    series = coerce_faceted_series(raw)
    if len(series) == 0:
        return default
    groups = series[0].metadata.groups
    if index < len(groups) and groups[index].display_name:
        return groups[index].display_name
    return default


def y_axis_label(raw: Iterable[Any]) -> str:
    """Measure label from the first record's groups[0].displayName."""
    return _group_label(raw, 0, config.DEFAULT_Y_AXIS_LABEL)


def x_axis_label(raw: Iterable[Any]) -> str:
    """First facet label from the first record's groups[1].displayName."""
    return _group_label(raw, 1, config.DEFAULT_X_AXIS_LABEL)
