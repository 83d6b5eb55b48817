"""Core data models shared across depscan components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class EntityType(str, Enum):
    """Kind of resource an activity record describes."""

    FILE = "file"
    APP = "app"
    DOMAIN = "domain"


class Language(str, Enum):
    """Language tags understood by the parser registry."""

    C = "C"
    CPP = "C++"
    CSHARP = "C#"
    ELM = "Elm"
    GO = "Go"
    HASKELL = "Haskell"
    HAXE = "Haxe"
    HTML = "HTML"
    JAVA = "Java"
    JAVASCRIPT = "JavaScript"
    JSON = "JSON"
    JSX = "JSX"
    KOTLIN = "Kotlin"
    OBJECTIVE_C = "Objective-C"
    PHP = "PHP"
    PYTHON = "Python"
    RUST = "Rust"
    SCALA = "Scala"
    SWIFT = "Swift"
    TSX = "TSX"
    TYPESCRIPT = "TypeScript"
    VBNET = "VB.NET"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class Heartbeat:
    """One unit of tracked activity, annotated with detected dependencies."""

    entity: str
    entity_type: EntityType
    language: Optional[str] = None
    local_file: Optional[str] = None
    dependencies: Optional[List[str]] = None


@dataclass
class Result:
    """Outcome reported by a downstream batch handler for one heartbeat."""

    status: int
    heartbeat: Optional[Heartbeat] = None
    errors: List[str] = field(default_factory=list)


__all__ = ["EntityType", "Heartbeat", "Language", "Result"]
