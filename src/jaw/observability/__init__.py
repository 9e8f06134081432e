from .logging import LogMessage
from .sinks import JsonlLogSink, LogSink, MemoryLogSink, StdoutLogSink, log_sink_from_settings

__all__ = [
    "JsonlLogSink",
    "LogMessage",
    "LogSink",
    "MemoryLogSink",
    "StdoutLogSink",
    "log_sink_from_settings",
]
