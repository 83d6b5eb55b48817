"""Dependency parser for Java import declarations."""

from __future__ import annotations

import re

from .base import C_STYLE, STATEMENT_START, CommentSyntax, RegexParser, first_segment

_SYNTAX = CommentSyntax(
    line=C_STYLE.line,
    block=C_STYLE.block,
    quotes=C_STYLE.quotes,
    multiline_quotes=('"""',),
    blank_strings=True,
)

_IMPORT = re.compile(
    STATEMENT_START + r"import[ \t]+(?:static[ \t]+)?(?P<name>[\w.]+?)(?:\.\*)?[ \t]*;",
    re.MULTILINE,
)


class JavaParser(RegexParser):
    """Reports the top-level package of each import."""

    syntax = _SYNTAX
    patterns = (_IMPORT,)

    def root(self, name: str) -> str:
        return first_segment(name)
