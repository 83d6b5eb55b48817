"""Dependency parser for Go import declarations."""

from __future__ import annotations

import re
from typing import Iterable

from .base import CommentSyntax, RegexParser

_SYNTAX = CommentSyntax(
    line=("//",),
    block=(("/*", "*/"),),
    quotes=('"', "'"),
    multiline_quotes=("`",),
)

_PATH = r'(?:"(?P<{0}>[^"\n]*)"|`(?P<{1}>[^`]*)`)'

_SINGLE = re.compile(
    r"^[ \t]*import[ \t]+(?:[\w.]+[ \t]+)?" + _PATH.format("name", "raw"),
    re.MULTILINE,
)
_GROUP = re.compile(r"^[ \t]*import[ \t]*\((?P<body>[^)]*)\)", re.MULTILINE)
_GROUP_ENTRY = re.compile(_PATH.format("name", "raw"))


class GoParser(RegexParser):
    """Keeps full import paths from single and grouped imports."""

    syntax = _SYNTAX
    patterns = (_SINGLE, _GROUP)

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        if match.re is _GROUP:
            entries = _GROUP_ENTRY.finditer(match.group("body"))
            return [_import_path(entry) for entry in entries]
        return [_import_path(match)]


def _import_path(match: re.Match[str]) -> str:
    path = match.group("name")
    if path is None:
        path = match.group("raw") or ""
    return path.strip()
