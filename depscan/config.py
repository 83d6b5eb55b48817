"""Configuration loading for dependency detection (.depscan.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".depscan.yml"

_MATCH_EVERYTHING = ".*"


@dataclass(frozen=True)
class DetectionConfig:
    """Sanitization patterns evaluated against each heartbeat's entity path.

    A heartbeat whose entity matches any pattern never has its file content
    inspected.
    """

    file_patterns: Tuple[re.Pattern[str], ...] = ()

    @classmethod
    def from_patterns(cls, patterns: Iterable[str | re.Pattern[str]]) -> "DetectionConfig":
        """Build a config from raw regular expressions or compiled patterns."""
        compiled: List[re.Pattern[str]] = []
        for pattern in patterns:
            if isinstance(pattern, re.Pattern):
                compiled.append(pattern)
                continue
            try:
                compiled.append(re.compile(pattern))
            except re.error as exc:
                raise ConfigError(f"Invalid sanitization pattern {pattern!r}: {exc}") from exc
        return cls(file_patterns=tuple(compiled))

    def should_sanitize(self, entity: str) -> bool:
        """Return True when any pattern matches the entity path."""
        return any(pattern.search(entity) for pattern in self.file_patterns)


def load_config(config_path: Path) -> DetectionConfig:
    """Load detection settings from disk, returning defaults when absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return DetectionConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    sanitize = _as_dict(data.get("sanitize"))
    return DetectionConfig.from_patterns(_as_patterns(sanitize.get("file_patterns")))


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_patterns(value: Any) -> List[str]:
    # `true` hides every file, mirroring the boolean form of privacy settings.
    if value is True:
        return [_MATCH_EVERYTHING]
    if value is None or value is False:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    raise ConfigError("sanitize.file_patterns must be a boolean, string or list of strings")


__all__ = ["CONFIG_FILENAME", "DetectionConfig", "load_config"]
