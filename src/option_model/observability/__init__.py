from .adapters import JsonlLogSink, LogSink, MemoryLogSink
from .domain import LogMessage

__all__ = [
    "LogMessage",
    "LogSink",
    "JsonlLogSink",
    "MemoryLogSink",
]
