from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from jaw.adapters.stream import (
    FileLineSource,
    StreamLineSource,
    line_source_from_settings,
    stdin_line_source,
)


def test_stream_source_strips_terminators_by_default() -> None:
    stream = io.StringIO("first\nsecond\r\n\n")
    source = StreamLineSource(stream=lambda: stream)
    assert source.read_line() == "first"
    assert source.read_line() == "second"
    # A blank typed line is a valid (empty) line, not end of stream.
    assert source.read_line() == ""


def test_stream_source_keeps_terminators_when_configured() -> None:
    stream = io.StringIO("raw\n")
    source = StreamLineSource(stream=lambda: stream, strip_newline=False)
    assert source.read_line() == "raw\n"


def test_stream_source_end_of_stream_raises_eof() -> None:
    stream = io.StringIO("")
    source = StreamLineSource(stream=lambda: stream)
    with pytest.raises(EOFError):
        source.read_line()


def test_stream_source_returns_last_line_without_terminator() -> None:
    stream = io.StringIO("tail")
    source = StreamLineSource(stream=lambda: stream)
    assert source.read_line() == "tail"
    with pytest.raises(EOFError):
        source.read_line()


def test_stdin_source_reads_current_sys_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    # sys.stdin is resolved at read time, not at construction.
    source = stdin_line_source()
    monkeypatch.setattr(sys, "stdin", io.StringIO("typed\n"))
    assert source.read_line() == "typed"


def test_file_source_reads_lazily(tmp_path: Path) -> None:
    path = tmp_path / "answers.txt"
    source = FileLineSource(path)
    # Construction does not touch the filesystem.
    path.write_text("a\nb\n", encoding="utf-8")
    assert source.read_line() == "a"
    assert source.read_line() == "b"
    with pytest.raises(EOFError):
        source.read_line()
    source.close()
    source.close()


def test_file_source_missing_file_raises_os_error(tmp_path: Path) -> None:
    source = FileLineSource(tmp_path / "nope.txt")
    with pytest.raises(FileNotFoundError):
        source.read_line()


def test_line_source_from_settings_file(tmp_path: Path) -> None:
    path = tmp_path / "in.txt"
    path.write_text("x\n", encoding="utf-8")
    source = line_source_from_settings({"kind": "file", "path": str(path)})
    assert isinstance(source, FileLineSource)
    assert source.read_line() == "x"


def test_line_source_from_settings_defaults_to_stdin() -> None:
    assert isinstance(line_source_from_settings({}), StreamLineSource)


def test_line_source_from_settings_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        line_source_from_settings({"kind": "file"})
    with pytest.raises(ValueError):
        line_source_from_settings({"kind": "socket"})


def test_stream_source_undecodable_bytes_raise_os_error() -> None:
    # Bad encoding is a medium failure, so the reader reports it as IoFailure.
    stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe bad\n"), encoding="utf-8")
    source = StreamLineSource(stream=lambda: stream)
    with pytest.raises(OSError, match="invalid input encoding") as exc:
        source.read_line()
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_file_source_undecodable_bytes_raise_os_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff\n")
    source = FileLineSource(path)
    with pytest.raises(OSError):
        source.read_line()
    source.close()
    assert source.closed
