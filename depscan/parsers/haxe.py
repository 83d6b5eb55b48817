"""Dependency parser for Haxe `import` and `using` declarations."""

from __future__ import annotations

import re

from .base import C_STYLE, STATEMENT_START, RegexParser, first_segment

_IMPORT = re.compile(
    STATEMENT_START + r"(?:import|using)[ \t]+(?P<name>[\w.]+)",
    re.MULTILINE,
)


class HaxeParser(RegexParser):
    syntax = C_STYLE
    patterns = (_IMPORT,)

    def root(self, name: str) -> str:
        return first_segment(name)
