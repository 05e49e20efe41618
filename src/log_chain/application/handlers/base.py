"""Abstract handler node of the Chain of Responsibility.

Purpose
-------
Provide the traversal algorithm shared by every handler: try to consume a
message locally, otherwise forward it to the next node.

Contents
--------
* :class:`LogHandler` - abstract base with ``set_next``/``handle`` and the
  abstract ``process`` capability.

System Role
-----------
Concrete handlers in this package subclass :class:`LogHandler`; the chain
assembly use case links instances together.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from log_chain.domain import LogMessage

logger = logging.getLogger(__name__)


class LogHandler(ABC):
    """Handler node holding a non-owning link to its successor.

    Chains are assumed acyclic; a cycle would recurse until Python's
    recursion limit is hit.
    """

    def __init__(self) -> None:
        self._next_handler: LogHandler | None = None

    @property
    def next_handler(self) -> LogHandler | None:
        """Return the successor, or ``None`` for the terminal node."""

        return self._next_handler

    def set_next(self, handler: LogHandler) -> LogHandler:
        """Link ``handler`` as successor, replacing any previous link.

        Returns ``handler`` so links can be chained fluently.
        """

        self._next_handler = handler
        return handler

    def handle(self, message: LogMessage) -> None:
        """Consume ``message`` here or forward it down the chain.

        Dispatch stops at this node when :meth:`process` consumed the message
        or when there is no successor. Exceptions raised by :meth:`process`
        propagate to the caller untouched.
        """

        if self.process(message):
            logger.debug("%s consumed %s message", type(self).__name__, message.type.severity)
            return
        if self._next_handler is None:
            logger.debug("%s message dropped at end of chain", message.type.severity)
            return
        logger.debug("%s forwards %s message to %s", type(self).__name__, message.type.severity, type(self._next_handler).__name__)
        self._next_handler.handle(message)

    @abstractmethod
    def process(self, message: LogMessage) -> bool:
        """Return ``True`` after consuming ``message``; ``False`` leaves it untouched."""


__all__ = ["LogHandler"]
