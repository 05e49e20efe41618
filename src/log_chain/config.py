"""Environment-driven configuration with optional ``.env`` loading.

Purpose
-------
Centralise how the CLI and the demo driver resolve the error log file, the
diagnostic log level, and whether a nearby ``.env`` file is honoured.

Contents
--------
* Environment variable names and defaults.
* :func:`resolve_log_file`, :func:`resolve_log_level` - explicit value wins,
  then the environment, then the default.
* :func:`should_use_dotenv`, :func:`enable_dotenv` - ``.env`` support built on
  :mod:`dotenv`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

LOG_FILE_ENV_VAR = "LOG_CHAIN_FILE"
DEFAULT_LOG_FILE = "logs.txt"
LOG_LEVEL_ENV_VAR = "LOG_CHAIN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
DOTENV_ENV_VAR = "LOG_CHAIN_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_dotenv_loaded = False
_dotenv_path: Path | None = None


def resolve_log_file(explicit: str | Path | None = None) -> Path:
    """Return the append target for error messages.

    Examples
    --------
    >>> str(resolve_log_file("custom.log"))
    'custom.log'
    """

    if explicit:
        return Path(explicit)
    return Path(os.getenv(LOG_FILE_ENV_VAR) or DEFAULT_LOG_FILE)


def resolve_log_level(explicit: str | None = None) -> int:
    """Return the stdlib logging level for diagnostic output.

    Raises
    ------
    ValueError
        If the name is not one of the standard logging level names.
    """

    raw = explicit or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    if name not in _LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {raw!r}")
    return getattr(logging, name)


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether ``.env`` should be loaded.

    An explicit CLI flag wins; otherwise a truthy environment toggle enables it.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="on")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    :func:`dotenv.find_dotenv` searches the working directory and its parents.
    Loading happens at most once per process; later calls return the path
    found by the first call.
    """

    global _dotenv_loaded, _dotenv_path
    if _dotenv_loaded:
        return _dotenv_path
    _dotenv_loaded = True
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    load_dotenv(found, override=False)
    _dotenv_path = Path(found).resolve()
    return _dotenv_path


__all__ = [
    "DEFAULT_LOG_FILE",
    "DEFAULT_LOG_LEVEL",
    "DOTENV_ENV_VAR",
    "LOG_FILE_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "enable_dotenv",
    "resolve_log_file",
    "resolve_log_level",
    "should_use_dotenv",
]
