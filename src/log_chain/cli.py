"""Click command line interface for the handler chain.

Purpose
-------
Run the reference demo, dispatch ad-hoc messages into the reference chain,
and print package metadata. Exit-code mapping and traceback rendering are
delegated to :mod:`lib_cli_exit_tools`.

Contents
--------
* :func:`cli` - command group with global options.
* ``info``, ``demo``, ``dispatch`` subcommands.
* :func:`main` - entry point used by ``python -m log_chain`` and the
  ``log_chain`` console script.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .adapters import RichConsoleAdapter
from .application.use_cases import dispatch as dispatch_message
from .domain import LogMessage, MessageType
from .lib_log_chain import ENTRY_NAMES, build_reference_chain, configure_logging, report_outcome, run_demo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LOG_FILE_OPTION = click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"File receiving error messages (env {log_config.LOG_FILE_ENV_VAR}, default {log_config.DEFAULT_LOG_FILE}).",
)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks for unexpected errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (env {log_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--log-level",
    default=None,
    help=f"Diagnostic log level written to stderr (env {log_config.LOG_LEVEL_ENV_VAR}, default {log_config.DEFAULT_LOG_LEVEL}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, log_level: str | None) -> None:
    """Dispatch log messages through a Chain of Responsibility.

    Without a subcommand the reference demo is run.
    """

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    try:
        level = log_config.resolve_log_level(log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(level)

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_LOG_FILE_OPTION
def demo(log_file: Path | None = None) -> None:
    """Dispatch one sample message per type through the reference chain."""

    run_demo(log_file=log_file)


@cli.command("dispatch", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message_type", type=click.Choice([member.severity for member in MessageType], case_sensitive=False))
@click.argument("text")
@click.option(
    "--entry",
    type=click.Choice(ENTRY_NAMES, case_sensitive=False),
    default="fatal",
    show_default=True,
    help="Handler at which the message enters the reference chain.",
)
@_LOG_FILE_OPTION
def dispatch(message_type: str, text: str, entry: str, log_file: Path | None) -> None:
    """Dispatch TEXT classified as MESSAGE_TYPE into the reference chain."""

    chain = build_reference_chain(log_config.resolve_log_file(log_file))
    outcome = dispatch_message(chain.entry(entry), LogMessage(MessageType.from_name(message_type), text))
    report_outcome(outcome, RichConsoleAdapter(stderr=True))


def main(argv: Sequence[str] | None = None) -> int:
    """Run :func:`cli` through :func:`lib_cli_exit_tools.run_cli`.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    so repeated in-process invocations start from the same state.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
