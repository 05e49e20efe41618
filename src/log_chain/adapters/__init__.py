"""Adapter implementations for the application ports."""

from __future__ import annotations

from .console import RichConsoleAdapter
from .file_append import FileAppendAdapter

__all__ = ["FileAppendAdapter", "RichConsoleAdapter"]
