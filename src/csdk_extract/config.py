"""Run configuration for a single extraction.

Collects everything one run needs (the device, the application directory,
where artifacts and references live, and how to invoke make) into a
:class:`ExtractConfig`, so the pipeline stages never read ``sys.argv`` or
the process environment themselves.

Usage::

    from csdk_extract.config import load_config

    cfg = load_config("apps/app-boilerplate", "stax")
    cfg.defines_path        # <cwd>/c_sdk_build_stax.defines
    cfg.sdk_path            # value of $STAX_SDK
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from csdk_extract.devices import DeviceSpec, get_device
from csdk_extract.errors import ExtractError

# Overrides the build orchestrator command, e.g. "gmake" or "make -s".
MAKE_ENV = "CSDK_EXTRACT_MAKE"
_DEFAULT_MAKE = "make"

REFERENCES_DIRNAME = "references"


def artifact_name(device: str, suffix: str) -> str:
    """Return the artifact file name for *device* (``suffix`` is ``defines`` or ``cflags``)."""
    return f"c_sdk_build_{device}.{suffix}"


@dataclass
class ExtractConfig:
    """Resolved settings for one extraction run."""

    device: DeviceSpec
    app_path: Path
    # Directory the tool was started from; artifacts are written here
    output_dir: Path
    sdk_path: str
    references_dir: Path = field(default_factory=lambda: Path(REFERENCES_DIRNAME))
    make_command: list[str] = field(default_factory=lambda: [_DEFAULT_MAKE])

    @property
    def defines_path(self) -> Path:
        return self.output_dir / artifact_name(self.device.tag, "defines")

    @property
    def cflags_path(self) -> Path:
        return self.output_dir / artifact_name(self.device.tag, "cflags")

    @property
    def reference_defines_path(self) -> Path:
        return self.references_dir / artifact_name(self.device.tag, "defines")

    @property
    def reference_cflags_path(self) -> Path:
        return self.references_dir / artifact_name(self.device.tag, "cflags")


def _make_command(environ: Mapping[str, str]) -> list[str]:
    raw = environ.get(MAKE_ENV, "").strip()
    if not raw:
        return [_DEFAULT_MAKE]
    try:
        return shlex.split(raw)
    except ValueError as exc:
        raise ExtractError(f"Invalid {MAKE_ENV} value {raw!r}: {exc}") from exc


def load_config(
    app_path: str | Path,
    device: str,
    *,
    output_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ExtractConfig:
    """Build the configuration for extracting *device* flags from *app_path*.

    Args:
        app_path: Application directory containing the SDK-based Makefile.
            Relative paths are kept relative to the starting directory.
        device: Device tag; must be one of :data:`csdk_extract.devices.DEVICES`.
        output_dir: Where artifacts are written and references are looked up.
            Defaults to the current working directory.
        environ: Environment to read the SDK path from (default ``os.environ``).

    Raises:
        ExtractError: unknown device, or the device's SDK variable is unset.
    """
    spec = get_device(device)
    env = os.environ if environ is None else environ

    sdk_path = env.get(spec.sdk_env, "")
    if not sdk_path:
        raise ExtractError(
            f"Environment variable {spec.sdk_env} is not set "
            f"(path to the C SDK for {spec.tag})"
        )

    out = Path.cwd() if output_dir is None else Path(output_dir)
    return ExtractConfig(
        device=spec,
        app_path=Path(app_path),
        output_dir=out,
        sdk_path=sdk_path,
        references_dir=out / REFERENCES_DIRNAME,
        make_command=_make_command(env),
    )
