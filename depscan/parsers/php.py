"""Dependency parser for PHP namespace `use` imports."""

from __future__ import annotations

import re
from bisect import bisect_right
from functools import lru_cache
from typing import Iterable, List, Tuple

from .base import STATEMENT_START, CommentSyntax, RegexParser, split_top_level

_SYNTAX = CommentSyntax(
    line=("//", "#"),
    block=(("/*", "*/"),),
    quotes=('"', "'"),
    blank_strings=True,
)

_USE = re.compile(
    STATEMENT_START + r"use[ \t]+(?P<body>[\\\w][^;]*);",
    re.MULTILINE,
)
_KIND_PREFIX = re.compile(r"^(?:function|const)\s+")
_BRACE = re.compile(r"[{}]")
_NAMESPACE_HEAD = re.compile(r"\bnamespace\b[^;{}]*$")


class PHPParser(RegexParser):
    """Reports the vendor namespace, e.g. `Interop` for `Interop\\Container`."""

    syntax = _SYNTAX
    patterns = (_USE,)

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        # Inside a class or trait body `use` pulls in a trait, not a namespace.
        if _inside_body(match.string, match.start()):
            return []
        body = _KIND_PREFIX.sub("", match.group("body").strip())
        namespaces: List[str] = []
        for clause in split_top_level(body):
            clause = _KIND_PREFIX.sub("", clause)
            name = clause.split("{", 1)[0].split()
            if not name:
                continue
            vendor = name[0].lstrip("\\").split("\\", 1)[0]
            if vendor:
                namespaces.append(vendor)
        return namespaces


def _inside_body(code: str, offset: int) -> bool:
    positions, inside = _brace_scopes(code)
    index = bisect_right(positions, offset) - 1
    return index >= 0 and inside[index]


@lru_cache(maxsize=8)
def _brace_scopes(code: str) -> Tuple[Tuple[int, ...], Tuple[bool, ...]]:
    """Map each brace offset to whether the code after it sits in a non-namespace block."""
    positions: List[int] = []
    inside: List[bool] = []
    stack: List[bool] = []
    previous = 0
    for brace in _BRACE.finditer(code):
        if brace.group() == "{":
            head = code[previous : brace.start()]
            stack.append(_NAMESPACE_HEAD.search(head) is None)
        elif stack:
            stack.pop()
        previous = brace.end()
        positions.append(brace.start())
        inside.append(any(stack))
    return tuple(positions), tuple(inside)
