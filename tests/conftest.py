from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from log_chain import config as log_config
from log_chain.application.ports.console import ConsolePort


class RecordingConsole(ConsolePort):
    """Console port that keeps every written line in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values loaded from .env files
    for name in (log_config.LOG_FILE_ENV_VAR, log_config.LOG_LEVEL_ENV_VAR, log_config.DOTENV_ENV_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(log_config, "_dotenv_loaded", False)
    monkeypatch.setattr(log_config, "_dotenv_path", None)


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def error_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def buffered_console() -> Console:
    return Console(file=StringIO(), width=120)


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "logs.txt"
