"""Tests for the device table."""

import pytest

from csdk_extract.devices import DEVICES, DeviceSpec, device_names, get_device
from csdk_extract.errors import ExtractError


class TestDeviceTable:
    @pytest.mark.parametrize(
        ("tag", "target", "sdk_env"),
        [
            ("nanox", "nanox", "NANOX_SDK"),
            ("nanosplus", "nanos2", "NANOSP_SDK"),
            ("stax", "stax", "STAX_SDK"),
            ("flex", "flex", "FLEX_SDK"),
            ("apex_p", "apex_p", "APEX_P_SDK"),
        ],
    )
    def test_mapping(self, tag: str, target: str, sdk_env: str) -> None:
        assert get_device(tag) == DeviceSpec(tag, target, sdk_env)

    def test_names_in_order(self) -> None:
        assert device_names() == ["nanox", "nanosplus", "stax", "flex", "apex_p"]

    def test_keys_match_tags(self) -> None:
        for tag, spec in DEVICES.items():
            assert spec.tag == tag


class TestGetDevice:
    def test_unknown_lists_all_tags(self) -> None:
        with pytest.raises(ExtractError) as exc_info:
            get_device("nanos")
        msg = str(exc_info.value)
        assert "'nanos'" in msg
        for tag in device_names():
            assert tag in msg

    def test_target_value_is_not_a_tag(self) -> None:
        """``nanos2`` is the make TARGET, not an accepted device tag."""
        with pytest.raises(ExtractError):
            get_device("nanos2")

    def test_case_sensitive(self) -> None:
        with pytest.raises(ExtractError):
            get_device("STAX")
