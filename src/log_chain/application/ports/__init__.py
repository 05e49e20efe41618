"""Protocols the application layer depends on."""

from __future__ import annotations

from .append_target import AppendTargetPort
from .console import ConsolePort

__all__ = ["AppendTargetPort", "ConsolePort"]
