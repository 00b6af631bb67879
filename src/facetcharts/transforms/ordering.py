# src/facetcharts/transforms/ordering.py
"""
Calendar-aware ordering of category keys.

Facet values produced by time bucketing (`monthOf(...)`, `weekdayOf(...)`)
arrive as plain strings, so a lexical sort would put "April 2024" before
"January 2024". Every transformer that orders categories goes through
this module instead.

Key kinds
---------
- weekday:    one of Sunday..Saturday, ordered Sunday -> Saturday
- month_year: "<Month> <Year>" split on the first space; ordered by year
              first, then by calendar month. A first part that is not a
              month name gets month index -1, i.e. it sorts before every
              real month of the same year.
- other:      anything else. Other keys sort before weekday and
              month_year keys and compare equal among themselves, so a
              stable sort keeps their arrival order.

Weekday and month_year keys have no common order. Comparing or sorting
them together raises CategoryOrderError.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from facetcharts.transforms import config


WEEKDAY = "weekday"
MONTH_YEAR = "month_year"
OTHER = "other"

_WEEKDAY_INDEX = {d: i for i, d in enumerate(config.WEEKDAY_ORDER)}
_MONTH_INDEX = {m: i for i, m in enumerate(config.MONTH_ORDER)}


class CategoryOrderError(ValueError):
    """Raised when weekday keys are ordered together with month/year keys."""


def _parse_month_year(key: str):
    month, sep, year = key.partition(" ")
    if not sep:
        return None
    try:
        year_num = int(year)
    except ValueError:
        return None
    return year_num, _MONTH_INDEX.get(month, -1)


def classify_category_key(key: str) -> str:
    """Return the kind of `key`: 'weekday', 'month_year' or 'other'."""
    if key in _WEEKDAY_INDEX:
        return WEEKDAY
    if _parse_month_year(key) is not None:
        return MONTH_YEAR
    return OTHER


def category_sort_key(key: str) -> Tuple[int, ...]:
    """
    Sort key implementing the category order for a single key.

    Only meaningful for collections that do not mix weekday and
    month_year keys; use sort_category_keys() to get that check.
    """
    if key in _WEEKDAY_INDEX:
        return (1, _WEEKDAY_INDEX[key])
    parsed = _parse_month_year(key)
    if parsed is not None:
        return (1,) + parsed
    return (0,)


def compare_category_keys(a: str, b: str) -> int:
    """
    Three-way comparison of two category keys.

    Returns -1, 0 or 1. Raises CategoryOrderError when one key is a weekday
    and the other a month/year key.
    """
    kinds = {classify_category_key(a), classify_category_key(b)}
    if kinds == {WEEKDAY, MONTH_YEAR}:
        raise CategoryOrderError(f"Cannot order weekday and month/year keys together: {a!r}, {b!r}")

    ka, kb = category_sort_key(a), category_sort_key(b)
    return (ka > kb) - (ka < kb)


def sort_category_keys(keys: Iterable[str]) -> List[str]:
    """
    Stable sort of `keys` in category order.

    The whole collection is checked up front, so a weekday/month_year mix
    fails regardless of which pairs the sort would have compared.
    """
    keys = list(keys)
    kinds = {classify_category_key(k) for k in keys}
    if WEEKDAY in kinds and MONTH_YEAR in kinds:
        sample_w = next(k for k in keys if classify_category_key(k) == WEEKDAY)
        sample_m = next(k for k in keys if classify_category_key(k) == MONTH_YEAR)
        raise CategoryOrderError(
            f"Cannot order weekday and month/year keys together: {sample_w!r}, {sample_m!r}"
        )
    return sorted(keys, key=category_sort_key)
