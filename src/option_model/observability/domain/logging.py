from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})


@dataclass(frozen=True, slots=True)
class LogMessage:
    # One record of the layer-loading log; fields carry the layer path, depth and keys.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")
        if self.level not in LOG_LEVELS:
            raise ValueError(f"LogMessage level must be one of: {sorted(LOG_LEVELS)}, got {self.level!r}")
