"""Batch middleware that attaches detected dependencies to heartbeats."""

from __future__ import annotations

from typing import Callable, List, Optional

from .config import DetectionConfig
from .detector import detect
from .errors import ReadError
from .logging import get_logger
from .models import EntityType, Heartbeat, Language, Result

BatchHandler = Callable[[List[Heartbeat]], List[Result]]
HandleOption = Callable[[BatchHandler], BatchHandler]

logger = get_logger("middleware")


def with_detection(config: DetectionConfig) -> HandleOption:
    """Return a decorator that annotates file heartbeats before forwarding.

    Heartbeats are processed in order and mutated in place. A heartbeat whose
    file cannot be read keeps ``dependencies`` unset; the batch is still
    forwarded and only the wrapped handler can fail the call.
    """

    def option(next_handler: BatchHandler) -> BatchHandler:
        def handle(heartbeats: List[Heartbeat]) -> List[Result]:
            for heartbeat in heartbeats:
                _annotate(heartbeat, config)
            return next_handler(heartbeats)

        return handle

    return option


def _annotate(heartbeat: Heartbeat, config: DetectionConfig) -> None:
    if heartbeat.entity_type != EntityType.FILE:
        return

    if config.should_sanitize(heartbeat.entity):
        logger.debug("Skipping dependency detection for sanitized entity %s", heartbeat.entity)
        return

    filepath = heartbeat.local_file or heartbeat.entity

    if not _known_language(heartbeat.language):
        logger.debug("Skipping dependency detection for %s: unknown language", heartbeat.entity)
        return

    try:
        dependencies = detect(filepath, heartbeat.language)
    except ReadError as exc:
        logger.warning("Failed to detect dependencies for %s: %s", heartbeat.entity, exc)
        return

    heartbeat.dependencies = dependencies


def _known_language(language: Optional[str]) -> bool:
    return bool(language) and str(language).lower() != Language.UNKNOWN.value.lower()


__all__ = ["BatchHandler", "HandleOption", "with_detection"]
