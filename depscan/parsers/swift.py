"""Dependency parser for Swift module imports."""

from __future__ import annotations

import re

from .base import C_STYLE, CommentSyntax, RegexParser

_SYNTAX = CommentSyntax(
    line=C_STYLE.line,
    block=C_STYLE.block,
    quotes=('"',),
    multiline_quotes=('"""',),
    nested_blocks=True,
    blank_strings=True,
)

_KINDS = r"(?:typealias|struct|class|enum|protocol|let|var|func)"

_IMPORT = re.compile(
    r"(?:^|(?<=;))[ \t]*(?:@\w+(?:\([^)\n]*\))?[ \t]+)*import[ \t]+(?:"
    + _KINDS
    + r"[ \t]+)?(?P<name>\w+)",
    re.MULTILINE,
)


class SwiftParser(RegexParser):
    """Reports the imported module, ignoring any submodule or symbol path."""

    syntax = _SYNTAX
    patterns = (_IMPORT,)
