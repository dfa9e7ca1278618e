"""Scoped change of the process working directory."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Iterator
from pathlib import Path

from csdk_extract.errors import ExtractError


@contextlib.contextmanager
def working_directory(path: str | Path) -> Iterator[Path]:
    """Run the body with *path* as the working directory.

    The previous directory is restored on every exit path once the change
    succeeded, including exceptions and ``KeyboardInterrupt``.  Yields the
    directory that will be restored.
    """
    previous = Path.cwd()
    try:
        os.chdir(path)
    except OSError as exc:
        raise ExtractError(f"Failed to enter application directory {str(path)!r}: {exc}") from exc
    try:
        yield previous
    finally:
        os.chdir(previous)
