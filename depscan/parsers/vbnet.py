"""Dependency parser for VB.NET `Imports` statements."""

from __future__ import annotations

import re

from .base import CommentSyntax, RegexParser, first_segment

_SYNTAX = CommentSyntax(line=("'",), quotes=('"',), blank_strings=True)

_IMPORTS = re.compile(
    r"^[ \t]*Imports[ \t]+(?:\w+[ \t]*=[ \t]*)?(?P<name>[\w.]+)",
    re.MULTILINE | re.IGNORECASE,
)


class VBNetParser(RegexParser):
    syntax = _SYNTAX
    patterns = (_IMPORTS,)

    def root(self, name: str) -> str:
        return first_segment(name)
