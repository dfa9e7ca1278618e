"""Capture the command trace of a make dry run.

``make --trace --dry-run`` prints every recipe line it would execute without
running it.  Only stdout is kept; it is decoded lossily because file names in
the trace are not guaranteed to be UTF-8, while the flags we look for are.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from csdk_extract.errors import ExtractError

TRACE_ARGS = ("--trace", "--dry-run")


@dataclass
class TraceResult:
    """Decoded dry-run output and the exit status of make."""

    stdout: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def decode_output(raw: bytes) -> str:
    """Decode *raw* as UTF-8, replacing invalid sequences with U+FFFD."""
    return raw.decode("utf-8", errors="replace")


def capture_trace(make_command: Sequence[str]) -> TraceResult:
    """Run *make_command* in trace/dry-run mode and return its output.

    make inherits the current working directory and process environment.
    The exit status is returned, not checked: a failing dry run may still
    have printed the compile line we need.

    Raises:
        ExtractError: make could not be started at all.
    """
    cmd = [*make_command, *TRACE_ARGS]
    try:
        r = subprocess.run(cmd, capture_output=True)
    except FileNotFoundError as exc:
        raise ExtractError(f"Build orchestrator not found: {cmd[0]!r}") from exc
    except OSError as exc:
        raise ExtractError(f"Failed to run {' '.join(cmd)}: {exc}") from exc

    return TraceResult(stdout=decode_output(r.stdout or b""), returncode=r.returncode)
