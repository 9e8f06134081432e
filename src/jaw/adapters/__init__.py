from .scripted import ScriptedLineSource, ScriptExhaustedError
from .stream import FileLineSource, StreamLineSource, line_source_from_settings, stdin_line_source

# Public adapter exports make wiring simpler.
__all__ = [
    "FileLineSource",
    "ScriptExhaustedError",
    "ScriptedLineSource",
    "StreamLineSource",
    "line_source_from_settings",
    "stdin_line_source",
]
