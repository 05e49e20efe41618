"""Handler printing warnings to standard output."""

from __future__ import annotations

from log_chain.application.ports import ConsolePort
from log_chain.domain import LogMessage, MessageType

from .base import LogHandler


class WarningHandler(LogHandler):
    """Consume :attr:`MessageType.WARNING` by writing its text to the console."""

    def __init__(self, console: ConsolePort) -> None:
        super().__init__()
        self._console = console

    def process(self, message: LogMessage) -> bool:
        if message.type is not MessageType.WARNING:
            return False
        self._console.write_line(message.message)
        return True


__all__ = ["WarningHandler"]
