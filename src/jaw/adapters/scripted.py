from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from jaw.ports.line_source import LineSource


class ScriptExhaustedError(RuntimeError):
    # Reading past the scripted responses means the test itself is misconfigured.
    pass


@dataclass
class ScriptedLineSource(LineSource):
    """Test double replaying queued responses in order.

    Queued ``BaseException`` instances are raised instead of returned, which lets
    tests script I/O failures (e.g. ``OSError``) at a given attempt. Not safe for
    concurrent use without external locking.
    """

    _queue: deque[str | BaseException] = field(default_factory=deque, init=False, repr=False)
    _calls: int = field(default=0, init=False)

    @classmethod
    def of(cls, *values: str | BaseException) -> ScriptedLineSource:
        source = cls()
        source.extend(values)
        return source

    def add_value(self, value: str | BaseException) -> None:
        self._queue.append(value)

    def extend(self, values: Iterable[str | BaseException]) -> None:
        self._queue.extend(values)

    @property
    def calls(self) -> int:
        return self._calls

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def read_line(self) -> str:
        self._calls += 1
        if not self._queue:
            raise ScriptExhaustedError(f"no scripted response left for call #{self._calls}")
        value = self._queue.popleft()
        if isinstance(value, BaseException):
            raise value
        return value
