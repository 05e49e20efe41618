"""Use case linking handler instances into a chain.

Purpose
-------
Turn an ordered collection of :class:`LogHandler` objects into a singly-linked
chain and offer a read-only walk over an assembled chain.

Contents
--------
* :func:`link_handlers` - link handlers in order and return the head.
* :func:`iter_chain` - yield nodes from a given entry point to the terminal node.

System Role
-----------
Called by the composition root (:mod:`log_chain.lib_log_chain`) once at
start-up; links are not touched again during dispatch.
"""

from __future__ import annotations

from collections.abc import Iterator

from log_chain.application.handlers import LogHandler


def link_handlers(*handlers: LogHandler) -> LogHandler:
    """Link ``handlers`` in the given order and return the first one.

    The caller guarantees that no handler appears twice, keeping the chain
    acyclic.

    Examples
    --------
    >>> from log_chain.application.handlers import FatalErrorHandler, UnknownHandler
    >>> fatal, unknown = FatalErrorHandler(), UnknownHandler()
    >>> link_handlers(fatal, unknown) is fatal and fatal.next_handler is unknown
    True
    """

    if not handlers:
        raise ValueError("link_handlers() requires at least one handler")
    for current, following in zip(handlers, handlers[1:]):
        current.set_next(following)
    return handlers[0]


def iter_chain(head: LogHandler) -> Iterator[LogHandler]:
    """Yield ``head`` and every successor up to the terminal node."""

    node: LogHandler | None = head
    while node is not None:
        yield node
        node = node.next_handler


__all__ = ["iter_chain", "link_handlers"]
