"""Tests for the language to parser lookup table."""

from __future__ import annotations

import pytest

from depscan.models import Language
from depscan.parsers import NOOP_PARSER, PARSERS, lookup
from depscan.parsers.golang import GoParser
from depscan.parsers.javascript import JavaScriptParser
from depscan.parsers.python import PythonParser


def test_lookup_accepts_enum_and_strings() -> None:
    assert isinstance(lookup(Language.GO), GoParser)
    assert isinstance(lookup("Python"), PythonParser)
    assert isinstance(lookup("  python "), PythonParser)
    assert lookup("PYTHON") is lookup(Language.PYTHON)


def test_javascript_dialects_share_a_parser() -> None:
    parser = lookup(Language.JAVASCRIPT)

    assert isinstance(parser, JavaScriptParser)
    assert lookup(Language.TYPESCRIPT) is parser
    assert lookup(Language.JSX) is parser
    assert lookup(Language.TSX) is parser


@pytest.mark.parametrize("language", [None, "", "Brainfuck", Language.UNKNOWN])
def test_unsupported_languages_resolve_to_noop(language) -> None:  # noqa: ANN001
    parser = lookup(language)

    assert parser is NOOP_PARSER
    assert parser.parse("import os\n#include <stdio.h>\n") == []


def test_every_language_except_unknown_is_registered() -> None:
    registered = set(PARSERS)
    expected = {language.value.lower() for language in Language if language is not Language.UNKNOWN}

    assert registered == expected


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PARSERS["cobol"] = NOOP_PARSER  # type: ignore[index]
