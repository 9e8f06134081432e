from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    # Flat error taxonomy; callers branch on kind, never on message text.
    IO_FAILURE = "IoFailure"
    VALIDATION_FAILURE = "ValidationFailure"
    RETRIES_EXHAUSTED = "RetriesExhausted"


class InputReadError(RuntimeError):
    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"InputReadError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def io_failure(cls, exc: BaseException) -> InputReadError:
        # Message mirrors the underlying failure; the original exception is chained by the caller.
        return cls(str(exc) or type(exc).__name__, ErrorKind.IO_FAILURE)

    @classmethod
    def validation_failure(cls, reason: str) -> InputReadError:
        return cls(f"wrong input. {reason}", ErrorKind.VALIDATION_FAILURE)

    @classmethod
    def retries_exhausted(cls, last_reason: str) -> InputReadError:
        return cls(f"attempts to read input were failed. {last_reason}", ErrorKind.RETRIES_EXHAUSTED)
