from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from option_model.observability.adapters.logging import JsonlLogSink, MemoryLogSink, log_to_dict
from option_model.observability.domain.logging import LogMessage


def _message() -> LogMessage:
    return LogMessage(
        level="info",
        message="config layer loaded",
        timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
        fields={"depth": 0},
    )


def test_log_message_requires_level_and_message() -> None:
    with pytest.raises(ValueError):
        LogMessage(level="", message="x")
    with pytest.raises(ValueError):
        LogMessage(level="info", message="")


def test_log_message_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="level must be one of"):
        LogMessage(level="verbose", message="x")


def test_log_message_defaults_to_utc_timestamp() -> None:
    assert LogMessage(level="info", message="x").timestamp.tzinfo is UTC


def test_log_to_dict_uses_z_suffix() -> None:
    assert log_to_dict(_message()) == {
        "level": "info",
        "message": "config layer loaded",
        "timestamp": "2024-01-02T03:04:05Z",
        "fields": {"depth": 0},
    }


def test_jsonl_sink_appends_lines(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "layers.jsonl"
    sink = JsonlLogSink(path)
    sink.emit(_message())
    sink.emit(_message())
    sink.close()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["fields"] == {"depth": 0}


def test_memory_sink_keeps_order() -> None:
    sink = MemoryLogSink()
    first = LogMessage(level="info", message="a")
    second = LogMessage(level="info", message="b")
    sink.emit(first)
    sink.emit(second)
    assert sink.messages == [first, second]
