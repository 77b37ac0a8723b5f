from .logging import JsonlLogSink, LogSink, MemoryLogSink

__all__ = ["LogSink", "JsonlLogSink", "MemoryLogSink"]
