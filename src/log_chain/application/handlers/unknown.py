"""Handler rejecting messages of unknown classification."""

from __future__ import annotations

from log_chain.domain import LogMessage, MessageType, UnrecoverableMessageError

from .base import LogHandler


class UnknownHandler(LogHandler):
    """Raise on :attr:`MessageType.UNKNOWN` with an ``Unhandled message (...)`` payload."""

    def process(self, message: LogMessage) -> bool:
        if message.type is MessageType.UNKNOWN:
            raise UnrecoverableMessageError(f"Unhandled message ({message.message})")
        return False


__all__ = ["UnknownHandler"]
