"""Dependency parser for Python import statements."""

from __future__ import annotations

import re
from typing import Iterable, List

from .base import CommentSyntax, RegexParser, first_segment

_SYNTAX = CommentSyntax(
    line=("#",),
    quotes=('"', "'"),
    multiline_quotes=('"""', "'''"),
    blank_strings=True,
)

# A continued line is not a new statement.
_START = r"(?:^(?<!\\\n)|(?<=;))[ \t]*"
# Horizontal whitespace or a backslash line continuation.
_GAP = r"(?:[ \t]|\\\n)"

_SEPARATOR = f"(?:{_GAP}*,{_GAP}*|{_GAP}+)"

_IMPORT = re.compile(
    _START + f"import{_GAP}+" + r"(?P<names>[\w.]+(?:" + _SEPARATOR + r"[\w.]+)*)",
    re.MULTILINE,
)
_FROM = re.compile(
    _START + f"from{_GAP}+" + r"(?P<name>\.*[\w.]*)" + f"{_GAP}+import" + r"\b",
    re.MULTILINE,
)
_ALIAS = re.compile(f"{_GAP}+as{_GAP}+" + r"\w+")
_CONTINUATION = re.compile(r"\\\n")


class PythonParser(RegexParser):
    """Reports the top-level package of absolute imports."""

    syntax = _SYNTAX
    patterns = (_IMPORT, _FROM)

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        if match.re is _FROM:
            return _absolute([match.group("name")])
        names = _ALIAS.sub("", _CONTINUATION.sub(" ", match.group("names")))
        return _absolute(name for name in names.split(","))


def _absolute(names: Iterable[str]) -> List[str]:
    packages: List[str] = []
    for name in names:
        name = name.strip()
        # Relative imports point inside the current package.
        if not name or name.startswith("."):
            continue
        packages.append(first_segment(name))
    return packages
