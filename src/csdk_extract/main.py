"""main.py: ``extract`` command entry point.

Usage::

    extract --app-path apps/app-boilerplate --device stax
    extract -a apps/app-boilerplate -d nanosplus --verbose
"""

from __future__ import annotations

import typer
from rich.console import Console

from csdk_extract import __version__
from csdk_extract.cli import AppPathOption, DeviceOption, error_exit, json_print, warn
from csdk_extract.errors import ExtractError
from csdk_extract.pipeline import ExtractReport, run_extraction
from csdk_extract.verify import unified_diff

app = typer.Typer(
    help="Extract C SDK defines and cflags from a make dry run.",
    rich_markup_mode="rich",
    add_completion=False,
    epilog="""\
[bold]Environment:[/bold]
  NANOX_SDK, NANOSP_SDK, STAX_SDK, FLEX_SDK, APEX_P_SDK
                       Path to the C SDK for the selected device
  CSDK_EXTRACT_MAKE    Orchestrator command (default: make)

[dim]Writes c_sdk_build_<device>.defines and c_sdk_build_<device>.cflags in the
current directory and compares them with references/.[/dim]""",
)

_diff_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"csdk-extract {__version__}")
        raise typer.Exit()


def _report_text(report: ExtractReport, *, verbose: bool) -> None:
    cfg = report.cfg
    if report.compile_line_found:
        typer.echo(f"Wrote {report.define_count} defines to {cfg.defines_path.name}")
        typer.echo(f"Wrote {report.cflag_count} cflags to {cfg.cflags_path.name}")
    else:
        typer.echo(f"No compile line found; wrote empty artifacts for {cfg.device.tag}")
    if verbose:
        for mismatch in report.mismatches:
            _diff_console.print(unified_diff(mismatch), markup=False, end="")


@app.command()
def main(
    app_path: str = AppPathOption,
    device: str = DeviceOption,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show a diff for artifacts that differ from references"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output a summary as JSON"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Run ``make --trace --dry-run`` for an app and extract its compile flags.

    The first ``clang -c`` command of the trace is split into ``#define``
    lines and residual compiler flags.  Differences from the reference files
    are reported on stderr but do not change the exit code.
    """
    try:
        report = run_extraction(app_path, device)
    except ExtractError as exc:
        error_exit(str(exc), json_mode=json_output)

    if not report.trace.ok:
        warn(f"make exited with status {report.trace.returncode}; parsed its output anyway")
    if not report.compile_line_found:
        warn(f"No 'clang -c' line in make output for target {report.cfg.device.tag}")
    for mismatch in report.mismatches:
        warn(mismatch.message)

    if json_output:
        json_print(report.to_dict())
    else:
        _report_text(report, verbose=verbose)


def main_entry() -> None:
    """Run the Typer CLI application."""
    app()


if __name__ == "__main__":
    main_entry()
