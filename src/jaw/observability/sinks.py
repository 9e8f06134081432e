from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from jaw.observability.logging import LogMessage


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Deliver one structured log message."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")


class StdoutLogSink:
    # Compact JSON per line; stderr is used so prompts on stdout stay clean.
    def __init__(self, stream_name: str = "stderr") -> None:
        if stream_name not in {"stdout", "stderr"}:
            raise ValueError("stream_name must be 'stdout' or 'stderr'")
        self._stream_name = stream_name

    def emit(self, message: LogMessage) -> None:
        stream = sys.stdout if self._stream_name == "stdout" else sys.stderr
        print(json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False), file=stream)


class JsonlLogSink:
    # Appends reader diagnostics (rejections, exhaustion, I/O failures) as one JSON object per line.
    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._handle: TextIO = path.open("a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def emit(self, message: LogMessage) -> None:
        record = json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False)
        self._handle.write(f"{record}\n")
        # Flushed per record so a reader blocked on input never hides earlier diagnostics.
        self._handle.flush()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()


class MemoryLogSink:
    # Collects messages in order; used for assertions.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def levels(self) -> list[str]:
        return [m.level for m in self.messages]


def log_sink_from_settings(settings: dict[str, object]) -> LogSink:
    kind = settings.get("sink", "stdout")
    if kind == "stdout":
        return StdoutLogSink(str(settings.get("stream", "stderr")))
    if kind == "jsonl":
        path = settings.get("path")
        if not isinstance(path, str) or not path:
            raise ValueError("logging.path must be a non-empty string for sink 'jsonl'")
        return JsonlLogSink(Path(path))
    raise ValueError(f"Unknown log sink: {kind!r}")
