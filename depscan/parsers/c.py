"""Dependency parsers for C-family preprocessor includes."""

from __future__ import annotations

import re
from typing import Iterable

from .base import CommentSyntax, RegexParser

# Include paths are string literals, so string contents must survive.
_SYNTAX = CommentSyntax(line=("//",), block=(("/*", "*/"),), quotes=('"', "'"))

_INCLUDE = re.compile(
    r'^[ \t]*#[ \t]*include[ \t]*(?:<(?P<angle>[^>\n]+)>|"(?P<quoted>[^"\n]+)")',
    re.MULTILINE,
)
_IMPORT = re.compile(
    r'^[ \t]*#[ \t]*import[ \t]*(?:<(?P<angle>[^>\n]+)>|"(?P<quoted>[^"\n]+)")',
    re.MULTILINE,
)
_MODULE_IMPORT = re.compile(r"^[ \t]*@import[ \t]+(?P<name>[\w.]+)[ \t]*;", re.MULTILINE)


def include_root(path: str) -> str:
    """Return the first meaningful path segment without its extension."""
    segments = [
        segment
        for segment in re.split(r"[/\\]", path.strip())
        if segment not in {"", ".", ".."}
    ]
    if not segments:
        return ""
    head = segments[0]
    if "." in head:
        head = head.rsplit(".", 1)[0]
    return head


class CParser(RegexParser):
    """`#include` directives in C and C++ sources."""

    syntax = _SYNTAX
    patterns = (_INCLUDE,)

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        path = match.group("angle") or match.group("quoted") or ""
        return [include_root(path)]


class ObjectiveCParser(CParser):
    """Objective-C `#include`, `#import` and `@import` declarations."""

    patterns = (_INCLUDE, _IMPORT, _MODULE_IMPORT)

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        if match.re is _MODULE_IMPORT:
            return [match.group("name").split(".", 1)[0]]
        return super().roots(match)
