from __future__ import annotations

from typing import Protocol, runtime_checkable


# LineSource port: one complete line per call, or OSError/EOFError when the medium cannot produce one.
@runtime_checkable
class LineSource(Protocol):
    def read_line(self) -> str:
        """Consume and return the next line of input."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LineSource is a port; use a concrete adapter.")
