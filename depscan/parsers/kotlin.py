"""Dependency parser for Kotlin import directives."""

from __future__ import annotations

import re

from .base import C_STYLE, STATEMENT_START, CommentSyntax, RegexParser

_SYNTAX = CommentSyntax(
    line=C_STYLE.line,
    block=C_STYLE.block,
    quotes=C_STYLE.quotes,
    multiline_quotes=('"""',),
    nested_blocks=True,
    blank_strings=True,
)

_IMPORT = re.compile(STATEMENT_START + r"import[ \t]+(?P<name>[\w.`]+)", re.MULTILINE)


class KotlinParser(RegexParser):
    """Keeps the first two segments of the imported name."""

    syntax = _SYNTAX
    patterns = (_IMPORT,)

    def root(self, name: str) -> str:
        segments = [segment for segment in name.replace("`", "").split(".") if segment]
        return ".".join(segments[:2])
