"""Immutable log message travelling along the handler chain."""

from __future__ import annotations

from dataclasses import dataclass

from .levels import MessageType


@dataclass(slots=True, frozen=True)
class LogMessage:
    """Pair of classification and text, read-only after construction.

    Attributes
    ----------
    type:
        :class:`MessageType` selecting the consuming handler.
    message:
        Text emitted by whichever handler consumes the message.

    Examples
    --------
    >>> msg = LogMessage(MessageType.WARNING, "disk almost full")
    >>> msg.type is MessageType.WARNING, msg.message
    (True, 'disk almost full')
    """

    type: MessageType
    message: str


__all__ = ["LogMessage"]
