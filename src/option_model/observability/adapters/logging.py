from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from option_model.observability.domain.logging import LogMessage


class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None: ...


class JsonlLogSink:
    # File-backed structured log sink; appends one JSON object per line.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class MemoryLogSink:
    # Keeps messages in emission order; handy for embedding and tests.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)


def log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
