"""Domain value objects used by the handler chain."""

from __future__ import annotations

from .errors import UnrecoverableMessageError
from .levels import MessageType
from .messages import LogMessage

__all__ = [
    "LogMessage",
    "MessageType",
    "UnrecoverableMessageError",
]
