"""Dependency parser for Haskell module imports."""

from __future__ import annotations

import re

from .base import CommentSyntax, RegexParser, first_segment

_SYNTAX = CommentSyntax(
    line=("--",),
    block=(("{-", "-}"),),
    quotes=('"',),
    nested_blocks=True,
    blank_strings=True,
)

_IMPORT = re.compile(
    r'^[ \t]*import[ \t]+(?:safe[ \t]+)?(?:qualified[ \t]+)?'
    r'(?:"[^"\n]*"[ \t]+)?(?P<name>[A-Z][\w.\']*)',
    re.MULTILINE,
)


class HaskellParser(RegexParser):
    """Reports the top-level module hierarchy, e.g. `Control` for `Control.Monad`."""

    syntax = _SYNTAX
    patterns = (_IMPORT,)

    def root(self, name: str) -> str:
        return first_segment(name)
