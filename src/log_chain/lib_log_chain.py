"""Composition root wiring handlers, adapters, and the reference driver.

Purpose
-------
Expose a small API for building the reference handler chain with concrete
Rich and file adapters, running the demo dispatch sequence, and installing
diagnostic logging. This module is the only place where application code
meets adapter implementations.

Contents
--------
* :class:`ReferenceChain` - the four handlers of the reference configuration.
* :func:`build_reference_chain`, :func:`run_demo`, :func:`report_outcome`.
* :func:`configure_logging` - Rich-backed diagnostics on standard error.
* :func:`summary_info` - metadata banner used by the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .adapters import FileAppendAdapter, RichConsoleAdapter
from .application.handlers import ErrorHandler, FatalErrorHandler, LogHandler, UnknownHandler, WarningHandler
from .application.ports import ConsolePort
from .application.use_cases import DispatchOutcome, dispatch, link_handlers
from .config import resolve_log_file
from .domain import LogMessage, MessageType

logger = logging.getLogger(__name__)

ENTRY_NAMES = ("fatal", "error", "warning", "unknown")


@dataclass(slots=True)
class ReferenceChain:
    """Handlers of the reference configuration, linked Fatal → Error → Warning → Unknown."""

    fatal: FatalErrorHandler
    error: ErrorHandler
    warning: WarningHandler
    unknown: UnknownHandler

    @property
    def head(self) -> LogHandler:
        return self.fatal

    def entry(self, name: str) -> LogHandler:
        """Return the handler called ``name`` (one of :data:`ENTRY_NAMES`).

        Examples
        --------
        >>> chain = build_reference_chain("logs.txt")
        >>> chain.entry("Warning") is chain.warning
        True
        """
        normalized = name.strip().lower()
        if normalized not in ENTRY_NAMES:
            raise ValueError(f"Unknown entry handler: {name!r}")
        return getattr(self, normalized)


def build_reference_chain(log_file: str | Path, *, console: ConsolePort | None = None) -> ReferenceChain:
    """Create one handler per variant and link them Fatal → Error → Warning → Unknown.

    Parameters
    ----------
    log_file:
        Append target used by the :class:`ErrorHandler`.
    console:
        Output for the :class:`WarningHandler`; defaults to Rich on stdout.
    """

    chain = ReferenceChain(
        fatal=FatalErrorHandler(),
        error=ErrorHandler(FileAppendAdapter(log_file)),
        warning=WarningHandler(console if console is not None else RichConsoleAdapter()),
        unknown=UnknownHandler(),
    )
    link_handlers(chain.fatal, chain.error, chain.warning, chain.unknown)
    return chain


def report_outcome(outcome: DispatchOutcome, error_console: ConsolePort) -> None:
    """Print the unrecoverable payload of ``outcome`` as ``Exception: <payload>``."""

    if outcome.unrecoverable is not None:
        error_console.write_line(f"Exception: {outcome.unrecoverable}")


def run_demo(
    *,
    log_file: str | Path | None = None,
    console: ConsolePort | None = None,
    error_console: ConsolePort | None = None,
) -> list[DispatchOutcome]:
    """Run the reference dispatch sequence and return one outcome per message.

    Each sample message enters the chain at the handler responsible for it:
    warning at Warning, error at Error, fatal error at Fatal, unknown at
    Unknown. Unrecoverable payloads are reported on ``error_console``
    (standard error by default) and the sequence continues.
    """

    chain = build_reference_chain(resolve_log_file(log_file), console=console)
    errors = error_console if error_console is not None else RichConsoleAdapter(stderr=True)
    plan = [
        (chain.warning, LogMessage(MessageType.WARNING, "Warning message")),
        (chain.error, LogMessage(MessageType.ERROR, "Error message")),
        (chain.fatal, LogMessage(MessageType.FATAL_ERROR, "Fatal error message")),
        (chain.unknown, LogMessage(MessageType.UNKNOWN, "UNKNOWN")),
    ]
    outcomes: list[DispatchOutcome] = []
    for entry, message in plan:
        outcome = dispatch(entry, message)
        report_outcome(outcome, errors)
        outcomes.append(outcome)
    logger.debug("demo dispatched %d messages", len(outcomes))
    return outcomes


def configure_logging(level: int) -> None:
    """Route ``log_chain`` diagnostics to standard error through :class:`RichHandler`.

    Standard output stays reserved for the warning handler. Calling this again
    replaces the handler installed by the previous call.
    """

    package_logger = logging.getLogger("log_chain")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "ENTRY_NAMES",
    "ReferenceChain",
    "build_reference_chain",
    "configure_logging",
    "report_outcome",
    "run_demo",
    "summary_info",
]
