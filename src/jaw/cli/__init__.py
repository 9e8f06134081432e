from .input import DEFAULT_MAX_ATTEMPTS, Input

__all__ = ["DEFAULT_MAX_ATTEMPTS", "Input"]
