"""Port for append-only text targets such as log files."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AppendTargetPort(Protocol):
    """Append a line of text to a persistent target.

    Implementations acquire and release the underlying resource per call and
    must not raise when the target cannot be opened.
    """

    def append_line(self, text: str) -> None: ...


__all__ = ["AppendTargetPort"]
