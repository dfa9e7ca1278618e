"""Supported Ledger devices and how each one is selected in the C SDK.

Every device maps to the ``TARGET`` value the SDK makefiles expect and to
the environment variable holding the path of the SDK checkout for that
device (re-exported to make as ``BOLOS_SDK``).
"""

from __future__ import annotations

from dataclasses import dataclass

from csdk_extract.errors import ExtractError


@dataclass(frozen=True)
class DeviceSpec:
    """How a device tag is presented to the SDK build."""

    tag: str
    target: str
    sdk_env: str


DEVICES: dict[str, DeviceSpec] = {
    "nanox": DeviceSpec("nanox", "nanox", "NANOX_SDK"),
    "nanosplus": DeviceSpec("nanosplus", "nanos2", "NANOSP_SDK"),
    "stax": DeviceSpec("stax", "stax", "STAX_SDK"),
    "flex": DeviceSpec("flex", "flex", "FLEX_SDK"),
    "apex_p": DeviceSpec("apex_p", "apex_p", "APEX_P_SDK"),
}


def device_names() -> list[str]:
    """Return the accepted device tags in declaration order."""
    return list(DEVICES)


def get_device(tag: str) -> DeviceSpec:
    """Look up *tag*, raising :class:`ExtractError` for unsupported devices."""
    try:
        return DEVICES[tag]
    except KeyError:
        raise ExtractError(
            f"Unsupported device type {tag!r}. "
            f"Supported types are: {', '.join(device_names())}"
        ) from None
