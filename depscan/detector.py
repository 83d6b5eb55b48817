"""Dependency detection for a single source file."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from .errors import ReadError
from .logging import get_logger
from .models import Language
from .normalize import normalize
from .parsers import lookup

# Source files are small; anything larger is not worth scanning.
MAX_FILE_BYTES = 2 * 1024 * 1024

logger = get_logger("detect")


def detect(
    path: Union[str, Path], language: Optional[Union[Language, str]]
) -> List[str]:
    """Return the ordered, deduplicated dependencies referenced by `path`.

    Unsupported languages yield an empty list. Raises :class:`ReadError` when
    the file cannot be read as UTF-8 text.
    """
    parser = lookup(language)
    text = read_source(Path(path))
    logger.debug("Parsing %s as %s with %s", path, language, parser.__class__.__name__)
    return normalize(parser.parse(text))


def read_source(path: Path) -> str:
    """Read a whole source file as text, enforcing ``MAX_FILE_BYTES``."""
    try:
        with path.open("rb") as handle:
            data = handle.read(MAX_FILE_BYTES + 1)
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        # Paths with embedded NUL bytes cannot be opened at all.
        raise ReadError(path, str(exc)) from exc

    if len(data) > MAX_FILE_BYTES:
        raise ReadError(path, f"file exceeds {MAX_FILE_BYTES} bytes")

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ReadError(path, "not valid UTF-8 text") from exc


__all__ = ["MAX_FILE_BYTES", "detect", "read_source"]
