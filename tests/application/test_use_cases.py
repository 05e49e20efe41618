from __future__ import annotations

import logging

import pytest

from log_chain.application.handlers import ErrorHandler, FatalErrorHandler, LogHandler, UnknownHandler, WarningHandler
from log_chain.application.use_cases import DispatchOutcome, dispatch, iter_chain, link_handlers
from log_chain.domain import LogMessage, MessageType


class _ExplodingHandler(LogHandler):
    def process(self, message: LogMessage) -> bool:
        raise KeyError(message.message)


def test_link_handlers_returns_head_and_links_in_order(recording_console) -> None:
    fatal = FatalErrorHandler()
    warning = WarningHandler(recording_console)
    unknown = UnknownHandler()

    head = link_handlers(fatal, warning, unknown)

    assert head is fatal
    assert fatal.next_handler is warning
    assert warning.next_handler is unknown
    assert unknown.next_handler is None


def test_link_handlers_with_single_handler_returns_it_unlinked() -> None:
    unknown = UnknownHandler()

    assert link_handlers(unknown) is unknown
    assert unknown.next_handler is None


def test_link_handlers_requires_handlers() -> None:
    with pytest.raises(ValueError, match="at least one handler"):
        link_handlers()


def test_iter_chain_walks_from_any_entry_point(recording_console) -> None:
    fatal = FatalErrorHandler()
    error = ErrorHandler(_NullTarget())
    warning = WarningHandler(recording_console)
    unknown = UnknownHandler()
    link_handlers(fatal, error, warning, unknown)

    assert list(iter_chain(fatal)) == [fatal, error, warning, unknown]
    assert list(iter_chain(warning)) == [warning, unknown]
    assert list(iter_chain(unknown)) == [unknown]


def test_dispatch_returns_ok_outcome_when_consumed(recording_console) -> None:
    message = LogMessage(MessageType.WARNING, "Warning message")

    outcome = dispatch(WarningHandler(recording_console), message)

    assert outcome == DispatchOutcome(message=message)
    assert outcome.ok
    assert recording_console.lines == ["Warning message"]


def test_dispatch_returns_ok_outcome_when_dropped() -> None:
    outcome = dispatch(UnknownHandler(), LogMessage(MessageType.WARNING, "dropped"))

    assert outcome.ok
    assert outcome.unrecoverable is None


def test_dispatch_captures_unrecoverable_payload_from_deep_in_the_chain(recording_console) -> None:
    head = link_handlers(WarningHandler(recording_console), FatalErrorHandler())
    message = LogMessage(MessageType.FATAL_ERROR, "Fatal error message")

    outcome = dispatch(head, message)

    assert not outcome.ok
    assert outcome.message is message
    assert outcome.unrecoverable == "Fatal error message"


def test_dispatch_does_not_capture_other_exceptions() -> None:
    with pytest.raises(KeyError):
        dispatch(_ExplodingHandler(), LogMessage(MessageType.WARNING, "boom"))


def test_dispatch_logs_aborted_messages(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="log_chain"):
        dispatch(UnknownHandler(), LogMessage(MessageType.UNKNOWN, "UNKNOWN"))

    assert "Unhandled message (UNKNOWN)" in caplog.text


class _NullTarget:
    def append_line(self, text: str) -> None:
        return None
