from __future__ import annotations

from collections.abc import Callable
from typing import Any

# A validator receives the raw line; returning False or raising ValueError rejects it.
Validator = Callable[[str], Any]

PREDICATE_REJECTED = "predicate rejected input"


class Rejected(ValueError):
    # Explicit rejection raised by validators that want a custom reason.
    def __init__(self, reason: object) -> None:
        super().__init__(str(reason))
        self.reason = str(reason)


def check(validator: Validator, line: str) -> str | None:
    """Apply ``validator`` to ``line``.

    Returns ``None`` when the line is accepted, otherwise the rejection reason.
    Any derived value the validator returns is discarded. Exceptions other than
    ``ValueError`` are treated as bugs in the validator and propagate.
    """
    try:
        outcome = validator(line)
    except ValueError as exc:
        return str(exc) or type(exc).__name__
    if outcome is False:
        return PREDICATE_REJECTED
    return None


def parse_int(low: int | None = None, high: int | None = None) -> Callable[[str], int]:
    # Builds an integer parser with optional inclusive bounds, e.g. parse_int(0, 255) for a byte.
    def _parse(line: str) -> int:
        value = int(line.strip())
        if low is not None and value < low:
            raise Rejected(f"number too small: {value} < {low}")
        if high is not None and value > high:
            raise Rejected(f"number too large: {value} > {high}")
        return value

    return _parse
