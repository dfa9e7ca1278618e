"""Shared fixtures: a scratch workspace and a fake ``make``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import SimpleNamespace

import pytest

SDK_VARS = ("NANOX_SDK", "NANOSP_SDK", "STAX_SDK", "FLEX_SDK", "APEX_P_SDK")


@dataclass
class FakeMake:
    """Stand-in for ``subprocess.run`` that records how make was invoked."""

    stdout: bytes = b""
    returncode: int = 0
    calls: list[dict[str, object]] = field(default_factory=list)

    def __call__(self, cmd: list[str], **kwargs: object) -> SimpleNamespace:
        self.calls.append(
            {
                "cmd": list(cmd),
                "cwd": Path.cwd(),
                "TARGET": os.environ.get("TARGET"),
                "BOLOS_SDK": os.environ.get("BOLOS_SDK"),
                "kwargs": kwargs,
            }
        )
        return SimpleNamespace(stdout=self.stdout, stderr=b"", returncode=self.returncode)


@pytest.fixture
def sdk_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Set every device SDK variable and make TARGET/BOLOS_SDK restorable."""
    sdk = tmp_path / "sdk"
    sdk.mkdir()
    # setenv first so monkeypatch restores whatever the pipeline writes
    monkeypatch.setenv("TARGET", "")
    monkeypatch.setenv("BOLOS_SDK", "")
    monkeypatch.delenv("CSDK_EXTRACT_MAKE", raising=False)
    for var in SDK_VARS:
        monkeypatch.setenv(var, str(sdk))
    return sdk


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, sdk_env: Path) -> Path:
    """Run from *tmp_path* with an ``app/`` directory and empty ``references/``."""
    (tmp_path / "app").mkdir()
    (tmp_path / "references").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_make(monkeypatch: pytest.MonkeyPatch) -> FakeMake:
    fake = FakeMake()
    monkeypatch.setattr("csdk_extract.trace.subprocess.run", fake)
    return fake


def write_references(root: Path, device: str, defines: str, cflags: str) -> None:
    refs = root / "references"
    refs.mkdir(exist_ok=True)
    (refs / f"c_sdk_build_{device}.defines").write_bytes(defines.encode("utf-8"))
    (refs / f"c_sdk_build_{device}.cflags").write_bytes(cflags.encode("utf-8"))
