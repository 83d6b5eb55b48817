"""Dependency parser for JSON package manifests (package.json, bower.json)."""

from __future__ import annotations

import json
from typing import List

from .base import DependencyParser

_DEPENDENCY_KEYS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


class JSONParser(DependencyParser):
    """Reads package names from the dependency sections of a manifest."""

    def parse(self, text: str) -> List[str]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            return []
        if not isinstance(data, dict):
            return []

        packages: List[str] = []
        for key in _DEPENDENCY_KEYS:
            section = data.get(key)
            if isinstance(section, dict):
                packages.extend(name for name in section.keys() if isinstance(name, str))
        return packages
