"""Use case dispatching a single message into a handler chain.

Purpose
-------
Act as the boundary where an :class:`UnrecoverableMessageError` escaping the
chain is turned into a plain result the caller can inspect.

Contents
--------
* :class:`DispatchOutcome` - result of one dispatch.
* :func:`dispatch` - run ``entry.handle`` and capture unrecoverable payloads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from log_chain.application.handlers import LogHandler
from log_chain.domain import LogMessage, UnrecoverableMessageError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DispatchOutcome:
    """Result of dispatching ``message``.

    Attributes
    ----------
    message:
        The dispatched message.
    unrecoverable:
        Payload of the unrecoverable condition, ``None`` when dispatch
        returned normally (consumed or silently dropped).
    """

    message: LogMessage
    unrecoverable: str | None = None

    @property
    def ok(self) -> bool:
        return self.unrecoverable is None


def dispatch(entry: LogHandler, message: LogMessage) -> DispatchOutcome:
    """Dispatch ``message`` starting at ``entry``.

    Only :class:`UnrecoverableMessageError` is captured; any other exception
    propagates.

    Examples
    --------
    >>> from log_chain.application.handlers import UnknownHandler
    >>> from log_chain.domain import MessageType
    >>> dispatch(UnknownHandler(), LogMessage(MessageType.UNKNOWN, "x")).unrecoverable
    'Unhandled message (x)'
    """

    try:
        entry.handle(message)
    except UnrecoverableMessageError as exc:
        logger.debug("dispatch of %s message aborted: %s", message.type.severity, exc.payload)
        return DispatchOutcome(message=message, unrecoverable=exc.payload)
    return DispatchOutcome(message=message)


__all__ = ["DispatchOutcome", "dispatch"]
