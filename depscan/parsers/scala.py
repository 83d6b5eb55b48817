"""Dependency parser for Scala import clauses."""

from __future__ import annotations

import re
from typing import Iterable, List

from .base import C_STYLE, STATEMENT_START, CommentSyntax, RegexParser, split_top_level

_SYNTAX = CommentSyntax(
    line=C_STYLE.line,
    block=C_STYLE.block,
    quotes=('"',),
    multiline_quotes=('"""',),
    nested_blocks=True,
    blank_strings=True,
)

_IMPORT = re.compile(STATEMENT_START + r"import[ \t]+(?P<body>[^\n;]+)", re.MULTILINE)
_WILDCARD = re.compile(r"\.(?:_|\*)$")


class ScalaParser(RegexParser):
    """Keeps the full imported path, minus selector braces and wildcards."""

    syntax = _SYNTAX
    patterns = (_IMPORT,)

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        dependencies: List[str] = []
        for clause in split_top_level(match.group("body")):
            words = clause.split("{", 1)[0].split()
            path = words[0] if words else ""
            path = _WILDCARD.sub("", path).rstrip(".")
            path = path.replace("`", "")
            if path:
                dependencies.append(path)
        return dependencies
