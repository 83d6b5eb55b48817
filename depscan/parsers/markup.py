"""Dependency parser for scripts referenced from HTML documents."""

from __future__ import annotations

import re

from .base import CommentSyntax, RegexParser

_SYNTAX = CommentSyntax(block=(("<!--", "-->"),))

_SCRIPT_SRC = re.compile(
    r"""<script\b[^>]*?\bsrc\s*=\s*(?P<quote>['"])(?P<name>[^'"\n]+)(?P=quote)""",
    re.IGNORECASE,
)


class HTMLParser(RegexParser):
    syntax = _SYNTAX
    patterns = (_SCRIPT_SRC,)
