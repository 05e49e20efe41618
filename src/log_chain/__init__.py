"""Public package surface of the log message handler chain.

Re-exports the domain types, the handler classes, and the composition helpers
so callers can write ``from log_chain import WarningHandler, LogMessage``.
"""

from __future__ import annotations

from .application.handlers import ErrorHandler, FatalErrorHandler, LogHandler, UnknownHandler, WarningHandler
from .application.use_cases import DispatchOutcome, dispatch, iter_chain, link_handlers
from .domain import LogMessage, MessageType, UnrecoverableMessageError
from .lib_log_chain import build_reference_chain, run_demo, summary_info

__all__ = [
    "DispatchOutcome",
    "ErrorHandler",
    "FatalErrorHandler",
    "LogHandler",
    "LogMessage",
    "MessageType",
    "UnknownHandler",
    "UnrecoverableMessageError",
    "WarningHandler",
    "build_reference_chain",
    "dispatch",
    "iter_chain",
    "link_handlers",
    "run_demo",
    "summary_info",
]
