"""Exception types raised by depscan."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class DepscanError(RuntimeError):
    """Base class for depscan failures."""


class ReadError(DepscanError):
    """Raised when a source file cannot be read as UTF-8 text."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = str(path)
        self.reason = reason


class ConfigError(DepscanError):
    """Raised when the detection configuration cannot be parsed."""


__all__ = ["ConfigError", "DepscanError", "ReadError"]
