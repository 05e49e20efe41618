"""File adapter implementing :class:`AppendTargetPort`.

Purpose
-------
Append lines to a text file, opening and closing it for every write so no
handle outlives a single call.

Contents
--------
* :class:`FileAppendAdapter` - append-mode writer that skips writes when the
  file cannot be opened.
"""

from __future__ import annotations

import logging
from pathlib import Path

from log_chain.application.ports.append_target import AppendTargetPort

logger = logging.getLogger(__name__)


class FileAppendAdapter(AppendTargetPort):
    """Append lines to ``path``; open failures are logged and otherwise ignored."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def append_line(self, text: str) -> None:
        """Append ``text`` plus a newline to the file.

        Undecodable bytes smuggled in as surrogate escapes (as in ``sys.argv``)
        are written back as the original bytes.

        Examples
        --------
        >>> import tempfile
        >>> target = Path(tempfile.mkdtemp()) / "logs.txt"
        >>> adapter = FileAppendAdapter(target)
        >>> adapter.append_line("first"); adapter.append_line("second")
        >>> target.read_text(encoding="utf-8")
        'first\\nsecond\\n'
        """
        try:
            with self._path.open("a", encoding=self._encoding, errors="surrogateescape") as handle:
                handle.write(f"{text}\n")
        except OSError as exc:
            logger.debug("skipping append to %s: %s", self._path, exc)


__all__ = ["FileAppendAdapter"]
