"""Message classifications routed through the handler chain.

Purpose
-------
Define the closed set of severities a :class:`~log_chain.domain.messages.LogMessage`
can carry. Each handler variant is responsible for exactly one member.

Contents
--------
* :class:`MessageType` enum with a name-parsing helper for the CLI.

System Role
-----------
Leaf of the domain layer; handlers compare against these members and nothing
else.
"""

from __future__ import annotations

from enum import Enum


class MessageType(Enum):
    """Closed enumeration of message kinds."""

    WARNING = "warning"
    ERROR = "error"
    FATAL_ERROR = "fatal_error"
    UNKNOWN = "unknown"

    @property
    def severity(self) -> str:
        """Return the lowercase name used on the command line."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "MessageType":
        """Resolve ``name`` case-insensitively; ``-`` and ``_`` are interchangeable.

        Examples
        --------
        >>> MessageType.from_name("Fatal-Error") is MessageType.FATAL_ERROR
        True
        """
        normalized = name.strip().upper().replace("-", "_")
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown message type: {name!r}") from exc


__all__ = ["MessageType"]
