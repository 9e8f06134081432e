from __future__ import annotations

from pathlib import Path
from typing import Generic, TypeVar

from jaw.adapters.stream import StreamLineSource, line_source_from_settings, stdin_line_source
from jaw.config.loader import load_config
from jaw.config.models import ReaderConfig
from jaw.domain.errors import InputReadError
from jaw.domain.validation import Validator, check
from jaw.observability.logging import LogMessage
from jaw.observability.sinks import LogSink, log_sink_from_settings
from jaw.ports.line_source import LineSource

DEFAULT_MAX_ATTEMPTS = 3

S = TypeVar("S", bound=LineSource)


class Input(Generic[S]):
    """Validated reader over a single, exclusively owned :class:`LineSource`.

    Every operation consumes exactly one line per attempt and raises
    :class:`InputReadError` on failure. I/O failures (``OSError``/``EOFError``
    raised by the source) are surfaced as ``IoFailure`` and never retried.
    Nothing is printed and nothing is logged unless ``log_sink`` is given.
    """

    __slots__ = ("_source", "_max_attempts", "_log_sink")

    def __init__(
        self,
        source: S,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        log_sink: LogSink | None = None,
    ) -> None:
        _require_attempts(max_attempts)
        self._source = source
        self._max_attempts = max_attempts
        self._log_sink = log_sink

    @classmethod
    def default(cls) -> Input[StreamLineSource]:
        # Zero-configuration reader over the process standard input.
        return cls(stdin_line_source())

    @classmethod
    def from_config(cls, config: ReaderConfig | Path) -> Input[LineSource]:
        if isinstance(config, Path):
            config = load_config(config)
        source = line_source_from_settings(config.source.model_dump())
        log_sink = None
        if config.logging is not None:
            log_sink = log_sink_from_settings(config.logging.model_dump())
        return cls(source, max_attempts=config.max_attempts, log_sink=log_sink)

    def close(self) -> None:
        # Releases file-backed sources and sinks; close is idempotent on both.
        for resource in (self._source, self._log_sink):
            close = getattr(resource, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> Input[S]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def reader(self) -> S:
        # Exposed for test introspection (e.g. call counters on scripted sources).
        return self._source

    @property
    def log_sink(self) -> LogSink | None:
        return self._log_sink

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def read(self) -> str:
        try:
            return self._source.read_line()
        except (OSError, EOFError) as exc:
            self._log("error", "line source failed", error=str(exc) or type(exc).__name__)
            raise InputReadError.io_failure(exc) from exc

    def demand(self, validator: Validator) -> str:
        line = self.read()
        reason = check(validator, line)
        if reason is None:
            return line
        self._log("debug", "input rejected", attempt=1, max_attempts=1, reason=reason)
        raise InputReadError.validation_failure(reason)

    def demand_until(self, validator: Validator, max_attempts: int | None = None) -> str:
        """Read and validate until ``validator`` accepts, at most ``max_attempts`` times.

        Returns the first accepted line without further reads. When every
        attempt is rejected, raises ``RetriesExhausted`` carrying the reason of
        the last attempt only.
        """
        attempts = self._max_attempts if max_attempts is None else max_attempts
        _require_attempts(attempts)
        reason: str | None = None
        for attempt in range(1, attempts + 1):
            line = self.read()
            reason = check(validator, line)
            if reason is None:
                return line
            self._log("debug", "input rejected", attempt=attempt, max_attempts=attempts, reason=reason)
        self._log("warning", "attempts exhausted", max_attempts=attempts, reason=reason)
        raise InputReadError.retries_exhausted(reason or "")

    def _log(self, level: str, message: str, **fields: object) -> None:
        if self._log_sink is not None:
            self._log_sink.emit(LogMessage(level=level, message=message, fields=fields))


def _require_attempts(max_attempts: int) -> None:
    # Zero or negative bounds are caller bugs, rejected before any input is consumed.
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
        raise ValueError(f"max_attempts must be a positive integer, got {max_attempts!r}")
