"""Post-processing applied to raw dependency tokens."""

from __future__ import annotations

from typing import Iterable, List, Set

MAX_DEPENDENCY_LENGTH = 200


def normalize(tokens: Iterable[str]) -> List[str]:
    """Drop empty and over-long tokens, then deduplicate in first-seen order.

    The length ceiling is inclusive: a token of exactly
    ``MAX_DEPENDENCY_LENGTH`` characters is kept.
    """
    seen: Set[str] = set()
    result: List[str] = []
    for token in tokens:
        cleaned = token.strip()
        if not cleaned or len(cleaned) > MAX_DEPENDENCY_LENGTH:
            continue
        if cleaned in seen:
            continue
        seen.add(cleaned)
        result.append(cleaned)
    return result


__all__ = ["MAX_DEPENDENCY_LENGTH", "normalize"]
