"""Logging helpers for depscan.

The package only emits records under the ``depscan`` logger; handlers and
levels belong to the host application that embeds the middleware.
"""

from __future__ import annotations

import logging

_LOGGER_NAME = "depscan"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the depscan hierarchy, e.g. ``depscan.middleware``."""
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


__all__ = ["get_logger"]
