from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from log_chain import cli as cli_module
from log_chain import config as log_config


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory one level below a ``.env`` naming ``dotenv.log``."""

    (tmp_path / ".env").write_text(f"{log_config.LOG_FILE_ENV_VAR}=dotenv.log\n")
    nested = tmp_path / "nested"
    nested.mkdir()
    monkeypatch.chdir(nested)
    return nested


def test_resolve_log_file_prefers_explicit_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(log_config.LOG_FILE_ENV_VAR, "env.log")

    assert log_config.resolve_log_file("explicit.log") == Path("explicit.log")
    assert log_config.resolve_log_file() == Path("env.log")


def test_resolve_log_file_defaults_to_logs_txt() -> None:
    assert log_config.resolve_log_file() == Path("logs.txt")


def test_resolve_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert log_config.resolve_log_level() == logging.WARNING
    assert log_config.resolve_log_level("debug") == logging.DEBUG

    monkeypatch.setenv(log_config.LOG_LEVEL_ENV_VAR, "error")
    assert log_config.resolve_log_level() == logging.ERROR

    with pytest.raises(ValueError, match="Unknown log level"):
        log_config.resolve_log_level("loud")


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "yes", True),
        (None, "0", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_enable_dotenv_finds_env_file_in_parent_directory(project_dir: Path) -> None:
    loaded = log_config.enable_dotenv()

    assert loaded == (project_dir.parent / ".env").resolve()
    assert os.environ[log_config.LOG_FILE_ENV_VAR] == "dotenv.log"


def test_enable_dotenv_respects_existing_environment(project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(log_config.LOG_FILE_ENV_VAR, "real.log")

    assert log_config.enable_dotenv() is not None
    assert os.environ[log_config.LOG_FILE_ENV_VAR] == "real.log"


def test_enable_dotenv_loads_only_once(project_dir: Path) -> None:
    first = log_config.enable_dotenv()
    (project_dir.parent / ".env").unlink()

    assert log_config.enable_dotenv() == first


def test_enable_dotenv_returns_none_without_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(log_config, "find_dotenv", lambda **_: "")
    monkeypatch.chdir(tmp_path)

    assert log_config.enable_dotenv() is None


@pytest.mark.parametrize(
    "args, env_toggle, expected_file",
    [
        (["--use-dotenv", "demo"], None, "dotenv.log"),
        (["demo"], "1", "dotenv.log"),
        (["--no-use-dotenv", "demo"], "1", "logs.txt"),
        (["demo"], None, "logs.txt"),
    ],
)
def test_cli_dotenv_toggle_selects_error_log(
    project_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    args: list[str],
    env_toggle: str | None,
    expected_file: str,
) -> None:
    """The CLI flag wins over the environment toggle; a loaded .env redirects error messages."""

    if env_toggle is not None:
        monkeypatch.setenv(log_config.DOTENV_ENV_VAR, env_toggle)

    result = CliRunner().invoke(cli_module.cli, args)

    assert result.exit_code == 0, result.output
    assert sorted(path.name for path in project_dir.iterdir()) == [expected_file]
    assert (project_dir / expected_file).read_text(encoding="utf-8") == "Error message\n"
