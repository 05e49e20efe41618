"""Console port describing line-oriented terminal output.

Purpose
-------
Let handlers and the demo driver write plain lines to a console without
depending on Rich directly.

Contents
--------
* :class:`ConsolePort` - runtime-checkable protocol with a single
  ``write_line`` method.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Write one line of text followed by a line terminator."""

    def write_line(self, text: str) -> None:
        """Emit ``text`` verbatim plus ``\\n``."""


__all__ = ["ConsolePort"]
