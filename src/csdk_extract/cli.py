"""Shared CLI helpers: Typer options and standardised diagnostics.

Normal output goes to stdout; warnings and errors go to stderr through a
Rich console, one line each.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from csdk_extract.devices import device_names

AppPathOption: str = typer.Option(
    ...,
    "--app-path",
    "-a",
    help="Path to the application directory (the one holding its Makefile).",
)

DeviceOption: str = typer.Option(
    ...,
    "--device",
    "-d",
    help=f"Target device: {', '.join(device_names())}.",
)

_err_console = Console(stderr=True, soft_wrap=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as a single stderr error line and ``raise typer.Exit(code)``.

    With *json_mode* the error is also printed as a JSON object on stdout.
    """
    _err_console.print(f"[red bold]error:[/red bold] {escape(msg)}")
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    raise typer.Exit(code=code)


def warn(msg: str) -> None:
    """Print a single warning line to stderr."""
    _err_console.print(f"[yellow bold]warning:[/yellow bold] {escape(msg)}")


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))
