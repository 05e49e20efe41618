"""Unrecoverable dispatch condition raised by terminal handlers."""

from __future__ import annotations


class UnrecoverableMessageError(RuntimeError):
    """Signal that a message cannot be handled as ordinary control flow.

    The payload is the text shown to the operator; ``str(error)`` returns it
    unchanged.

    Examples
    --------
    >>> err = UnrecoverableMessageError("disk on fire")
    >>> err.payload == str(err) == "disk on fire"
    True
    """

    def __init__(self, payload: str) -> None:
        super().__init__(payload)
        self.payload = payload


__all__ = ["UnrecoverableMessageError"]
