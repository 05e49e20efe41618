"""Rich-backed console adapter implementing :class:`ConsolePort`.

Purpose
-------
Write plain lines to standard output or standard error through the stream of
a Rich :class:`~rich.console.Console`. Text is written without rendering, so
tabs, carriage returns, control characters, markup, and emoji codes reach the
stream unchanged.

Contents
--------
* :class:`RichConsoleAdapter` - adapter constructed by
  :func:`log_chain.lib_log_chain.build_reference_chain` and the demo driver.
"""

from __future__ import annotations

from rich.console import Console

from log_chain.application.ports.console import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Write lines to the stream behind a Rich :class:`~rich.console.Console`."""

    def __init__(self, *, console: Console | None = None, stderr: bool = False) -> None:
        """Use ``console`` when given, otherwise a console bound to stdout or stderr."""
        self._console = console if console is not None else Console(stderr=stderr)

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a newline and flush.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> RichConsoleAdapter(console=Console(file=buffer)).write_line("[b]col1\\tcol2[/b]")
        >>> buffer.getvalue()
        '[b]col1\\tcol2[/b]\\n'
        """
        stream = self._console.file
        stream.write(f"{text}\n")
        stream.flush()


__all__ = ["RichConsoleAdapter"]
