"""Handler node base class and its four concrete variants."""

from __future__ import annotations

from .base import LogHandler
from .error import ErrorHandler
from .fatal import FatalErrorHandler
from .unknown import UnknownHandler
from .warning import WarningHandler

__all__ = [
    "ErrorHandler",
    "FatalErrorHandler",
    "LogHandler",
    "UnknownHandler",
    "WarningHandler",
]
