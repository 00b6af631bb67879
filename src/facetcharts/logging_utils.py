# src/facetcharts/logging_utils.py
"""
Logging helper for facetcharts.

Transformers never log; only the pipeline entry point and the output
checks do, through a logger handed in by the caller. `get_logger()` builds
a suitable one.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(
    name: str = "facetcharts",
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
    fmt: str = "%(message)s",
    propagate: bool = False,
) -> logging.Logger:
    """
    Return a logger writing plain messages to `stream` (stdout by default).

    Repeated calls with the same stream reuse the existing handler instead
    of stacking duplicates; level and format are refreshed on every call.

    Parameters
    ----------
    name:
        Logger name. Defaults to "facetcharts".
    level:
        Logging level, int or name ("DEBUG", "info", ...). Unknown names
        fall back to INFO.
    stream:
        Target stream. Defaults to sys.stdout.
    fmt:
        Formatter pattern. Defaults to the bare message.
    propagate:
        Whether records also reach ancestor loggers.
    """
    logger = logging.getLogger(name)
    stream = sys.stdout if stream is None else stream
    level = _resolve_level(level)
    formatter = logging.Formatter(fmt=fmt)

    logger.setLevel(level)
    logger.propagate = propagate

    handler = next(
        (
            h
            for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is stream
        ),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(stream)
        logger.addHandler(handler)

    handler.setLevel(level)
    handler.setFormatter(formatter)
    return logger
