"""Static package metadata surfaced by the CLI banner.

Purpose
-------
Keep the distribution name, version, and maintainer details in one module so
``log_chain info`` and :func:`log_chain.summary_info` never drift apart.

Contents
--------
* Module-level metadata constants.
* :func:`print_info` - render the metadata banner through a writer callable.
"""

from __future__ import annotations

from typing import Callable

name = "log_chain"
title = "Chain-of-Responsibility log message dispatch"
version = "0.1.0"
homepage = "https://github.com/bitranox/log_chain"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "log_chain"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line.

    Examples
    --------
    >>> captured = []
    >>> print_info(writer=captured.append)
    >>> captured[0]
    'Info for log_chain:\\n'
    """

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
