"""Detect the external modules a source file depends on."""

from .config import DetectionConfig, load_config
from .detector import detect
from .errors import ConfigError, DepscanError, ReadError
from .middleware import BatchHandler, with_detection
from .models import EntityType, Heartbeat, Language, Result

__all__ = [
    "BatchHandler",
    "ConfigError",
    "DepscanError",
    "DetectionConfig",
    "EntityType",
    "Heartbeat",
    "Language",
    "ReadError",
    "Result",
    "detect",
    "load_config",
    "with_detection",
]
