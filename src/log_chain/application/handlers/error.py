"""Handler appending error messages to a log file."""

from __future__ import annotations

from log_chain.application.ports import AppendTargetPort
from log_chain.domain import LogMessage, MessageType

from .base import LogHandler


class ErrorHandler(LogHandler):
    """Consume :attr:`MessageType.ERROR` by appending its text to ``target``.

    The message counts as consumed even when the target could not be opened;
    the append target swallows that failure.
    """

    def __init__(self, target: AppendTargetPort) -> None:
        super().__init__()
        self._target = target

    @property
    def target(self) -> AppendTargetPort:
        return self._target

    def process(self, message: LogMessage) -> bool:
        if message.type is not MessageType.ERROR:
            return False
        self._target.append_line(message.message)
        return True


__all__ = ["ErrorHandler"]
