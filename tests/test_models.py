"""Tests for depscan.models."""

from __future__ import annotations

from dataclasses import fields

from depscan.models import EntityType, Heartbeat, Language, Result


def test_result_carries_status_heartbeat_and_errors() -> None:
    heartbeat = Heartbeat(entity="main.go", entity_type=EntityType.FILE, language=Language.GO)
    result = Result(status=201, heartbeat=heartbeat)

    assert [item.name for item in fields(Result)] == ["status", "heartbeat", "errors"]
    assert result.errors == []
    assert Result(status=400).errors is not result.errors


def test_heartbeat_dependencies_start_unset() -> None:
    heartbeat = Heartbeat(entity="Terminal", entity_type=EntityType.APP)

    assert heartbeat.dependencies is None
    assert str(Language.CPP) == "C++"
