"""End-to-end extraction: stage, trace, parse, emit, compare."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from csdk_extract.config import ExtractConfig, load_config
from csdk_extract.emit import write_artifacts
from csdk_extract.parser import EMIT_MODE, BuildFlags, EmitMode, extract_build_flags
from csdk_extract.staging import stage_environment
from csdk_extract.trace import TraceResult, capture_trace
from csdk_extract.verify import Mismatch, compare_artifacts
from csdk_extract.workdir import working_directory


@dataclass
class ExtractReport:
    """Outcome of one extraction run."""

    cfg: ExtractConfig
    mode: EmitMode
    trace: TraceResult
    flags: Optional[BuildFlags]
    mismatches: list[Mismatch] = field(default_factory=list)

    @property
    def compile_line_found(self) -> bool:
        return self.flags is not None

    @property
    def define_count(self) -> int:
        return len(self.flags.defines) if self.flags is not None else 0

    @property
    def cflag_count(self) -> int:
        return len(self.flags.cflags) if self.flags is not None else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict for JSON output."""
        return {
            "device": self.cfg.device.tag,
            "target": self.cfg.device.target,
            "mode": self.mode.value,
            "make_returncode": self.trace.returncode,
            "compile_line_found": self.compile_line_found,
            "defines": self.define_count,
            "cflags": self.cflag_count,
            "defines_path": str(self.cfg.defines_path),
            "cflags_path": str(self.cfg.cflags_path),
            "mismatches": [m.to_dict() for m in self.mismatches],
        }


def trace_application(cfg: ExtractConfig) -> TraceResult:
    """Dry-run make inside the application directory for *cfg*'s device.

    The working directory is back to its original value when this returns
    or raises.
    """
    with working_directory(cfg.app_path):
        stage_environment(cfg)
        return capture_trace(cfg.make_command)


def run_extraction(
    app_path: str | Path,
    device: str,
    *,
    mode: EmitMode = EMIT_MODE,
    output_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ExtractReport:
    """Extract *device* build flags for the application at *app_path*.

    Writes ``c_sdk_build_<device>.defines`` and ``.cflags`` into *output_dir*
    (default: the current directory) and compares them with ``references/``.

    Raises:
        ExtractError: any fatal condition; artifacts are only written once
            the compile line parsed cleanly.
    """
    cfg = load_config(app_path, device, output_dir=output_dir, environ=environ)
    trace = trace_application(cfg)
    flags = extract_build_flags(trace.stdout, mode)
    write_artifacts(cfg, flags)
    mismatches = compare_artifacts(cfg)
    return ExtractReport(cfg=cfg, mode=mode, trace=trace, flags=flags, mismatches=mismatches)
