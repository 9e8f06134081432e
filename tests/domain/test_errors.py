from __future__ import annotations

from jaw.domain.errors import ErrorKind, InputReadError


def test_error_kinds_are_exactly_three() -> None:
    # Taxonomy is flat; callers branch on these values.
    assert [k.value for k in ErrorKind] == ["IoFailure", "ValidationFailure", "RetriesExhausted"]


def test_validation_failure_message_prefix() -> None:
    err = InputReadError.validation_failure("invalid digit found in string")
    assert err.kind is ErrorKind.VALIDATION_FAILURE
    assert str(err) == "wrong input. invalid digit found in string"


def test_retries_exhausted_message_prefix() -> None:
    err = InputReadError.retries_exhausted("please type 100")
    assert err.kind is ErrorKind.RETRIES_EXHAUSTED
    assert err.message == "attempts to read input were failed. please type 100"


def test_io_failure_uses_exception_text_or_type_name() -> None:
    assert str(InputReadError.io_failure(OSError("device gone"))) == "device gone"
    assert str(InputReadError.io_failure(EOFError())) == "EOFError"
    assert InputReadError.io_failure(EOFError()).kind is ErrorKind.IO_FAILURE
