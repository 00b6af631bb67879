# src/facetcharts/__init__.py
"""
facetcharts

Pure transformations that reshape faceted dashboard query results into
the input shapes of bar, stacked, cumulative, heatmap, Pareto, Sankey and
time-series charts.

Public API:
- get_logger
- transform_visualization
- check_transformed
- VISUALIZATIONS
"""

from __future__ import annotations

# Public logging utility
from .logging_utils import get_logger

# Public transformation entry point
from .pipeline import VISUALIZATIONS, transform_visualization

# Public output checks
from .validation.checks import check_transformed

__all__ = [
    "get_logger",
    "transform_visualization",
    "check_transformed",
    "VISUALIZATIONS",
]
