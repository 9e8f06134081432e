from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from jaw.ports.line_source import LineSource


def _next_line(handle: TextIO, strip_newline: bool) -> str:
    try:
        line = handle.readline()
    except UnicodeDecodeError as exc:
        # Undecodable bytes are a failure of the medium, not a rejectable line.
        raise OSError(f"invalid input encoding: {exc}") from exc
    if line == "":
        # readline() returns "" only at end of stream; an empty typed line is still "\n".
        raise EOFError("end of input stream")
    if strip_newline:
        return line.rstrip("\r\n")
    return line


@dataclass(slots=True)
class StreamLineSource(LineSource):
    # Stream is resolved per call so a replaced sys.stdin is honoured.
    stream: Callable[[], TextIO]
    strip_newline: bool = True

    def read_line(self) -> str:
        return _next_line(self.stream(), self.strip_newline)


@dataclass
class FileLineSource(LineSource):
    # File-backed LineSource; the file is opened on first read, not at construction.
    path: Path
    encoding: str = "utf-8"
    strip_newline: bool = True
    _handle: TextIO | None = field(default=None, init=False, repr=False)

    def read_line(self) -> str:
        if self._handle is None:
            self._handle = self.path.open("r", encoding=self.encoding)
        return _next_line(self._handle, self.strip_newline)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def close(self) -> None:
        # Close is idempotent.
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None


def stdin_line_source(*, strip_newline: bool = True) -> StreamLineSource:
    return StreamLineSource(stream=lambda: sys.stdin, strip_newline=strip_newline)


def line_source_from_settings(settings: dict[str, object]) -> LineSource:
    # Settings-driven factory used by config wiring; unknown kinds fail fast.
    kind = settings.get("kind", "stdin")
    strip_newline = bool(settings.get("strip_newline", True))
    if kind == "stdin":
        return stdin_line_source(strip_newline=strip_newline)
    if kind == "file":
        path = settings.get("path")
        if not isinstance(path, str) or not path:
            raise ValueError("source.path must be a non-empty string for kind 'file'")
        encoding = settings.get("encoding", "utf-8")
        if not isinstance(encoding, str) or not encoding:
            raise ValueError("source.encoding must be a non-empty string")
        return FileLineSource(Path(path), encoding=encoding, strip_newline=strip_newline)
    raise ValueError(f"Unknown line source kind: {kind!r}")
