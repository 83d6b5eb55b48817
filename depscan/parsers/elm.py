"""Dependency parser for Elm module imports."""

from __future__ import annotations

import re

from .base import CommentSyntax, RegexParser

_SYNTAX = CommentSyntax(
    line=("--",),
    block=(("{-", "-}"),),
    quotes=('"', "'"),
    multiline_quotes=('"""',),
    nested_blocks=True,
    blank_strings=True,
)

_IMPORT = re.compile(r"^[ \t]*import[ \t]+(?P<name>[A-Z]\w*)", re.MULTILINE)


class ElmParser(RegexParser):
    syntax = _SYNTAX
    patterns = (_IMPORT,)
