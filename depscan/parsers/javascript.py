"""Dependency parser for JavaScript and TypeScript module references."""

from __future__ import annotations

import re

from .base import CommentSyntax, RegexParser

# Module specifiers are string literals, so string contents must survive.
_SYNTAX = CommentSyntax(
    line=("//",),
    block=(("/*", "*/"),),
    quotes=('"', "'"),
    multiline_quotes=("`",),
)

_SPECIFIER = r"""(?P<quote>['"])(?P<name>[^'"\n]+)(?P=quote)"""

_STATIC_IMPORT = re.compile(
    r"\bimport\s+(?:[\w*${}\s,]+?\s+from\s+)?" + _SPECIFIER,
)
_REEXPORT = re.compile(
    r"\bexport\s+(?:type\s+)?(?:\*(?:\s+as\s+[\w$]+)?|\{[^}]*\})\s+from\s+" + _SPECIFIER,
)
_REQUIRE = re.compile(r"\brequire\s*\(\s*" + _SPECIFIER + r"\s*\)")
_DYNAMIC_IMPORT = re.compile(r"\bimport\s*\(\s*" + _SPECIFIER + r"\s*\)")


class JavaScriptParser(RegexParser):
    """Keeps module specifiers exactly as written."""

    syntax = _SYNTAX
    patterns = (_STATIC_IMPORT, _REEXPORT, _REQUIRE, _DYNAMIC_IMPORT)
