"""Dependency parser for C# `using` directives."""

from __future__ import annotations

import re

from .base import C_STYLE, STATEMENT_START, CommentSyntax, RegexParser

_SYNTAX = CommentSyntax(
    line=C_STYLE.line,
    block=C_STYLE.block,
    quotes=('"', "'"),
    multiline_quotes=('"""',),
    blank_strings=True,
)

_USING = re.compile(
    STATEMENT_START
    + r"(?:global[ \t]+)?using[ \t]+(?:static[ \t]+)?(?:\w+[ \t]*=[ \t]*)?"
    r"(?P<name>[\w.]+)[ \t]*(?:<[^;\n]*>)?[ \t]*;",
    re.MULTILINE,
)


class CSharpParser(RegexParser):
    """Keeps the full namespace of every `using` directive."""

    syntax = _SYNTAX
    patterns = (_USING,)
