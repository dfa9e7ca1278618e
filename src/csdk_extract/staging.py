"""Prepare the environment the SDK makefiles read."""

from __future__ import annotations

import os
from collections.abc import MutableMapping
from typing import Optional

from csdk_extract.config import ExtractConfig

TARGET_ENV = "TARGET"
SDK_ENV = "BOLOS_SDK"


def stage_environment(
    cfg: ExtractConfig, environ: Optional[MutableMapping[str, str]] = None
) -> None:
    """Export ``TARGET`` and ``BOLOS_SDK`` for *cfg*'s device.

    Writes into ``os.environ`` by default so the make child inherits them.
    The previous values are not restored; a run extracts a single device.
    """
    env = os.environ if environ is None else environ
    env[TARGET_ENV] = cfg.device.target
    env[SDK_ENV] = cfg.sdk_path
