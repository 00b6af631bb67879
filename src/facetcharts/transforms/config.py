# src/facetcharts/transforms/config.py
"""
Global configuration for facetcharts transformations.

This module defines *policy-level* constants used across the transformers
(sentinel filtering, facet fallbacks, category ordering, normalization).

These values are intentionally centralized to:
- make the filtering and ordering rules explicit and auditable
- avoid hard-coded magic strings inside the transformers
- allow callers to inspect the active policy

This module MUST NOT contain any computation logic.
"""

from __future__ import annotations


# =============================================================================
# Raw series filtering
# =============================================================================

# Overflow / DST-correction buckets injected by the query engine
SENTINEL_SERIES_NAMES = frozenset({"Other", "Daylight saving time"})

# Substitute for an absent facet group (groups[1] or groups[2])
UNKNOWN_FACET = "unknown"


# =============================================================================
# Axis labels
# =============================================================================

# Used when groups[0] carries no displayName
DEFAULT_Y_AXIS_LABEL = "Y-Axis"

# Used when groups[1] carries no displayName
DEFAULT_X_AXIS_LABEL = ""


# =============================================================================
# Category ordering
# =============================================================================

MONTH_ORDER = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_ORDER = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


# =============================================================================
# Normalization
# =============================================================================

# Target of per-row percentage normalization and Pareto cumulative share
PERCENT_TOTAL = 100.0

# Accepted floating-point slack when checking percentage sums
PERCENT_TOLERANCE = 1e-6
