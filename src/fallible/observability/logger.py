"""Logging setup for the fallible logger hierarchy.

Library modules log through ``logging.getLogger("fallible.<module>")`` and never
configure handlers themselves. Applications that want to see those records call
configure_logging() once at startup.

Quick Start:
    >>> from fallible.observability import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> log = get_logger("app")
    >>> log.info("ready")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from fallible.config import get_settings

ROOT_LOGGER = "fallible"

# Marks the handler installed by configure_logging so repeat calls replace it
_HANDLER_FLAG = "_fallible_handler"


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the package hierarchy: get_logger("x") -> "fallible.x"."""
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(
    level: str | int | None = None,
    *,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a single StreamHandler to the package logger.

    Arguments left as None fall back to settings (FALLIBLE_LOG_*). Calling again
    replaces the previously installed handler instead of stacking another one.
    """
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.logging.level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in root.handlers if getattr(h, _HANDLER_FLAG, False)]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or settings.logging.format))
    setattr(handler, _HANDLER_FLAG, True)
    root.addHandler(handler)
    root.setLevel(level)
    return root
