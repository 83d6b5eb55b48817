"""Dependency parser for Rust `use` declarations and `extern crate` items."""

from __future__ import annotations

import re
from typing import Iterable, List

from .base import C_STYLE, STATEMENT_START, CommentSyntax, RegexParser, split_top_level

# Single quotes are lifetimes and labels as often as char literals.
_SYNTAX = CommentSyntax(
    line=C_STYLE.line,
    block=C_STYLE.block,
    quotes=('"',),
    nested_blocks=True,
    blank_strings=True,
)

_USE = re.compile(
    STATEMENT_START
    + r"(?:#\[[^\]\n]*\][ \t]*)*(?:pub(?:\([^)\n]*\))?[ \t]+)?use[ \t]+(?P<tree>[^;]+);",
    re.MULTILINE,
)
_EXTERN_CRATE = re.compile(
    STATEMENT_START + r"(?:pub[ \t]+)?extern[ \t]+crate[ \t]+(?P<name>\w+)",
    re.MULTILINE,
)

# Path roots that refer to the current crate rather than a dependency.
_LOCAL_ROOTS = {"crate", "self", "super", "Self"}


class RustParser(RegexParser):
    """Reports the crate name at the root of each path."""

    syntax = _SYNTAX
    patterns = (_USE, _EXTERN_CRATE)

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        if match.re is _EXTERN_CRATE:
            return [match.group("name")]

        tree = " ".join(match.group("tree").split())
        if tree.startswith("::"):
            tree = tree[2:].lstrip()
        if tree.startswith("{") and tree.endswith("}"):
            items = split_top_level(tree[1:-1])
        else:
            items = [tree]

        crates: List[str] = []
        for item in items:
            crate = item.lstrip(":").split("::", 1)[0].strip()
            crate = crate.split()[0] if crate else ""
            if crate and crate not in _LOCAL_ROOTS and not crate.startswith("{"):
                crates.append(crate)
        return crates
