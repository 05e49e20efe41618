"""Handler aborting dispatch for fatal errors."""

from __future__ import annotations

from log_chain.domain import LogMessage, MessageType, UnrecoverableMessageError

from .base import LogHandler


class FatalErrorHandler(LogHandler):
    """Raise on :attr:`MessageType.FATAL_ERROR` with the raw message text.

    Examples
    --------
    >>> FatalErrorHandler().handle(LogMessage(MessageType.FATAL_ERROR, "boom"))
    Traceback (most recent call last):
    ...
    log_chain.domain.errors.UnrecoverableMessageError: boom
    """

    def process(self, message: LogMessage) -> bool:
        if message.type is MessageType.FATAL_ERROR:
            raise UnrecoverableMessageError(message.message)
        return False


__all__ = ["FatalErrorHandler"]
