from .cli import Input
from .domain import ErrorKind, InputReadError, Rejected, Validator, parse_int
from .ports import LineSource

# Top-level exports cover the common read/validate flow.
__all__ = [
    "ErrorKind",
    "Input",
    "InputReadError",
    "LineSource",
    "Rejected",
    "Validator",
    "parse_int",
]
