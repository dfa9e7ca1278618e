"""Compare freshly written artifacts with the committed references.

A mismatch is reported, not fatal: the references are a review aid that
flags SDK changes, and the artifacts are still usable.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path

from csdk_extract.config import ExtractConfig
from csdk_extract.errors import ExtractError


@dataclass
class Mismatch:
    """One artifact whose bytes differ from its reference."""

    kind: str  # "defines" or "cflags"
    device: str
    current: Path
    reference: Path

    @property
    def message(self) -> str:
        return f"Current {self.kind} file does not match reference for target {self.device}"

    def to_dict(self) -> dict[str, str]:
        """Serialize to a plain dict for JSON output."""
        return {
            "kind": self.kind,
            "device": self.device,
            "current": str(self.current),
            "reference": str(self.reference),
        }


def _read(path: Path, what: str) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise ExtractError(f"Failed to read {what} file: {path}") from exc
    except OSError as exc:
        raise ExtractError(f"Failed to read {what} file {path}: {exc}") from exc


def compare_artifacts(cfg: ExtractConfig) -> list[Mismatch]:
    """Byte-compare both artifacts of *cfg* with their references.

    Raises:
        ExtractError: an artifact or a reference file cannot be read.
    """
    pairs = [
        ("defines", cfg.defines_path, cfg.reference_defines_path),
        ("cflags", cfg.cflags_path, cfg.reference_cflags_path),
    ]
    # Read everything first so a missing reference fails before any report
    contents = [
        (
            kind,
            current,
            reference,
            _read(current, f"current {kind}"),
            _read(reference, f"reference {kind}"),
        )
        for kind, current, reference in pairs
    ]

    mismatches: list[Mismatch] = []
    for kind, current, reference, cur_bytes, ref_bytes in contents:
        if cur_bytes != ref_bytes:
            mismatches.append(Mismatch(kind, cfg.device.tag, current, reference))
    return mismatches


def unified_diff(mismatch: Mismatch) -> str:
    """Return a unified diff from the reference to the current artifact."""
    ref_text = mismatch.reference.read_text(encoding="utf-8", errors="replace")
    cur_text = mismatch.current.read_text(encoding="utf-8", errors="replace")
    return "".join(
        difflib.unified_diff(
            ref_text.splitlines(keepends=True),
            cur_text.splitlines(keepends=True),
            fromfile=str(mismatch.reference),
            tofile=str(mismatch.current),
        )
    )
