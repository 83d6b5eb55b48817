"""Base classes for dependency parsers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from itertools import chain
from typing import ClassVar, Iterable, List, Sequence, Tuple

_NOT_NEWLINE = re.compile(r"[^\n]")

# Start of a line, or right after a statement terminator or brace on the same line.
STATEMENT_START = r"(?:^|(?<=[;{}]))[ \t]*"


class DependencyParser(ABC):
    """Contract for parsers that turn source text into raw dependency tokens."""

    @abstractmethod
    def parse(self, text: str) -> List[str]:
        """Return dependency tokens in source order; may contain duplicates."""


class NoOpParser(DependencyParser):
    """Parser used for languages without dependency support."""

    def parse(self, text: str) -> List[str]:
        return []


@dataclass(frozen=True)
class CommentSyntax:
    """Lexical markers needed to tell code apart from comments and strings."""

    line: Tuple[str, ...] = ()
    block: Tuple[Tuple[str, str], ...] = ()
    quotes: Tuple[str, ...] = ()
    multiline_quotes: Tuple[str, ...] = ()
    nested_blocks: bool = False
    blank_strings: bool = False

    def openers(self) -> List[str]:
        markers = list(self.line)
        markers.extend(opener for opener, _ in self.block)
        markers.extend(self.quotes)
        markers.extend(self.multiline_quotes)
        # Longest first so `"""` wins over `"`.
        return sorted(set(markers), key=len, reverse=True)


C_STYLE = CommentSyntax(
    line=("//",),
    block=(("/*", "*/"),),
    quotes=('"', "'"),
    blank_strings=True,
)


def strip_comments(text: str, syntax: CommentSyntax) -> str:
    """Blank out comments (and optionally string contents) in one pass.

    Every removed character except newlines becomes a space, so offsets and
    line structure of the remaining code are unchanged.
    """
    openers = syntax.openers()
    if not openers:
        return text

    pattern = re.compile("|".join(re.escape(marker) for marker in openers))
    block_closers = dict(syntax.block)
    pieces: List[str] = []
    pos = 0
    length = len(text)

    while pos < length:
        match = pattern.search(text, pos)
        if match is None:
            pieces.append(text[pos:])
            break

        start, marker = match.start(), match.group()
        pieces.append(text[pos:start])

        if marker in syntax.line:
            end = text.find("\n", start)
            end = length if end == -1 else end
            pieces.append(_blank(text[start:end]))
        elif marker in block_closers:
            end = _block_end(text, start, marker, block_closers[marker], syntax.nested_blocks)
            pieces.append(_blank(text[start:end]))
        else:
            multiline = marker in syntax.multiline_quotes
            end = _string_end(text, match.end(), marker, multiline)
            if syntax.blank_strings:
                body = text[match.end():end]
                closer = marker if body.endswith(marker) else ""
                pieces.append(marker + _blank(body[: len(body) - len(closer)]) + closer)
            else:
                pieces.append(text[start:end])
        pos = end

    return "".join(pieces)


def _blank(value: str) -> str:
    return _NOT_NEWLINE.sub(" ", value)


def _block_end(text: str, start: int, opener: str, closer: str, nested: bool) -> int:
    if not nested:
        end = text.find(closer, start + len(opener))
        return len(text) if end == -1 else end + len(closer)

    depth = 0
    index = start
    while index < len(text):
        if text.startswith(closer, index):
            depth -= 1
            index += len(closer)
            if depth == 0:
                return index
            continue
        if text.startswith(opener, index):
            depth += 1
            index += len(opener)
            continue
        index += 1
    return len(text)


def _string_end(text: str, start: int, quote: str, multiline: bool) -> int:
    index = start
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if text.startswith(quote, index):
            return index + len(quote)
        if char == "\n" and not multiline:
            # Unterminated literal; resume scanning on the next line.
            return index
        index += 1
    return len(text)


def split_top_level(value: str, separator: str = ",", opener: str = "{", closer: str = "}") -> List[str]:
    """Split on `separator` while ignoring separators nested inside braces."""
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for char in value:
        if char == opener:
            depth += 1
        elif char == closer:
            depth = max(depth - 1, 0)
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


class RegexParser(DependencyParser):
    """Parser driven by statement patterns applied to comment-free text.

    Subclasses set ``syntax`` and ``patterns`` and override ``roots`` to turn
    a statement match into the dependency names it declares.
    """

    syntax: ClassVar[CommentSyntax] = C_STYLE
    patterns: ClassVar[Sequence[re.Pattern[str]]] = ()

    def parse(self, text: str) -> List[str]:
        cleaned = strip_comments(text, self.syntax)
        # Statement keywords must sit in code even when string contents are kept.
        code = cleaned
        if not self.syntax.blank_strings:
            code = strip_comments(text, replace(self.syntax, blank_strings=True))
        matches = chain.from_iterable(pattern.finditer(cleaned) for pattern in self.patterns)
        dependencies: List[str] = []
        for match in sorted(matches, key=lambda item: item.start()):
            if _starts_in_code(code, match):
                dependencies.extend(self.roots(match))
        return dependencies

    def roots(self, match: re.Match[str]) -> Iterable[str]:
        name = match.group("name")
        return [self.root(name)] if name else []

    def root(self, name: str) -> str:
        return name.strip()


def _starts_in_code(code: str, match: re.Match[str]) -> bool:
    matched = match.group()
    offset = match.start() + len(matched) - len(matched.lstrip())
    return not code[offset : offset + 1].isspace()


def first_segment(name: str, separator: str = ".") -> str:
    """Return the leading segment of a qualified name."""
    return name.strip().split(separator, 1)[0].strip()


__all__ = [
    "C_STYLE",
    "STATEMENT_START",
    "CommentSyntax",
    "DependencyParser",
    "NoOpParser",
    "RegexParser",
    "first_segment",
    "split_top_level",
    "strip_comments",
]
