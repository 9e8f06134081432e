from .errors import ErrorKind, InputReadError
from .validation import PREDICATE_REJECTED, Rejected, Validator, check, parse_int

# Public domain exports keep imports explicit across layers.
__all__ = [
    "ErrorKind",
    "InputReadError",
    "PREDICATE_REJECTED",
    "Rejected",
    "Validator",
    "check",
    "parse_int",
]
