"""Dependency parser implementations and the language lookup table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..models import Language
from .base import DependencyParser, NoOpParser
from .c import CParser, ObjectiveCParser
from .csharp import CSharpParser
from .elm import ElmParser
from .golang import GoParser
from .haskell import HaskellParser
from .haxe import HaxeParser
from .java import JavaParser
from .javascript import JavaScriptParser
from .kotlin import KotlinParser
from .manifest import JSONParser
from .markup import HTMLParser
from .php import PHPParser
from .python import PythonParser
from .rust import RustParser
from .scala import ScalaParser
from .swift import SwiftParser
from .vbnet import VBNetParser

NOOP_PARSER: DependencyParser = NoOpParser()

_javascript = JavaScriptParser()
_c = CParser()

_BUILTIN_PARSERS: dict[Language, DependencyParser] = {
    Language.C: _c,
    Language.CPP: _c,
    Language.CSHARP: CSharpParser(),
    Language.ELM: ElmParser(),
    Language.GO: GoParser(),
    Language.HASKELL: HaskellParser(),
    Language.HAXE: HaxeParser(),
    Language.HTML: HTMLParser(),
    Language.JAVA: JavaParser(),
    Language.JAVASCRIPT: _javascript,
    Language.JSON: JSONParser(),
    Language.JSX: _javascript,
    Language.KOTLIN: KotlinParser(),
    Language.OBJECTIVE_C: ObjectiveCParser(),
    Language.PHP: PHPParser(),
    Language.PYTHON: PythonParser(),
    Language.RUST: RustParser(),
    Language.SCALA: ScalaParser(),
    Language.SWIFT: SwiftParser(),
    Language.TSX: _javascript,
    Language.TYPESCRIPT: _javascript,
    Language.VBNET: VBNetParser(),
}

PARSERS: Mapping[str, DependencyParser] = MappingProxyType(
    {language.value.lower(): parser for language, parser in _BUILTIN_PARSERS.items()}
)


def lookup(language: Optional[Union[Language, str]]) -> DependencyParser:
    """Return the parser for `language`, or a no-op parser when unsupported."""
    if language is None:
        return NOOP_PARSER
    key = language.value if isinstance(language, Language) else str(language)
    return PARSERS.get(key.strip().lower(), NOOP_PARSER)


__all__ = [
    "DependencyParser",
    "NOOP_PARSER",
    "NoOpParser",
    "PARSERS",
    "lookup",
]
