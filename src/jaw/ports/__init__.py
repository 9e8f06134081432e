from .line_source import LineSource

__all__ = ["LineSource"]
