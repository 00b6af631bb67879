# src/facetcharts/validation/__init__.py
"""
Validation utilities for facetcharts.

This subpackage contains integrity checks over transformed payloads,
intended to fail fast before a broken shape reaches the renderer.

Public entry point:
- check_transformed
"""

from .checks import check_transformed

__all__ = ["check_transformed"]
