"""Write the ``.defines`` and ``.cflags`` artifacts."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path

from csdk_extract.config import ExtractConfig
from csdk_extract.parser import BuildFlags


def render_defines(flags: BuildFlags | None) -> str:
    """Return one ``#define`` line per definition, LF-terminated."""
    if flags is None:
        return ""
    return "".join(f"{entry.render()}\n" for entry in flags.defines)


def render_cflags(flags: BuildFlags | None) -> str:
    """Return one flag per line, LF-terminated."""
    if flags is None:
        return ""
    return "".join(f"{flag}\n" for flag in flags.cflags)


def _write_artifact(filepath: Path, text: str) -> None:
    # Bytes, not write_text(): line endings must stay LF on every platform
    tmp_path = filepath.with_suffix(filepath.suffix + ".tmp")
    try:
        tmp_path.write_bytes(text.encode("utf-8"))
        os.replace(tmp_path, filepath)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise


def write_artifacts(cfg: ExtractConfig, flags: BuildFlags | None) -> tuple[Path, Path]:
    """Write both artifacts for *cfg*'s device into its output directory.

    Both files are always (re)created; with ``flags=None`` (no compile line in
    the trace) they are empty.  Returns ``(defines_path, cflags_path)``.
    """
    _write_artifact(cfg.defines_path, render_defines(flags))
    _write_artifact(cfg.cflags_path, render_cflags(flags))
    return cfg.defines_path, cfg.cflags_path
