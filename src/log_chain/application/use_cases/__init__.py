"""Application use cases: chain assembly and message dispatch."""

from __future__ import annotations

from .chain import iter_chain, link_handlers
from .dispatch import DispatchOutcome, dispatch

__all__ = ["DispatchOutcome", "dispatch", "iter_chain", "link_handlers"]
