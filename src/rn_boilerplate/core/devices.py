"""Parsers for device-listing tool output.

Every function in this module is a **pure** transformation of the text
printed by ``adb``, ``xcrun`` and ``idevice_id``.
"""

from __future__ import annotations

import re

from rn_boilerplate.core.models import DeviceInfo

ANDROID_READY_STATUS: str = "device"

# key shown in output -> getprop property
ANDROID_DETAIL_PROPS: dict[str, str] = {
    "model": "ro.product.model",
    "android": "ro.build.version.release",
    "apiLevel": "ro.build.version.sdk",
    "brand": "ro.product.brand",
    "device": "ro.product.device",
}

# key shown in output -> ideviceinfo key
IOS_DETAIL_KEYS: dict[str, str] = {
    "productName": "ProductName",
    "iosVersion": "ProductVersion",
    "deviceName": "DeviceName",
    "model": "DeviceClass",
    "hardware": "HardwareModel",
}

_XCTRACE_SKIP_MARKERS: tuple[str, ...] = ("Devices", "==", "macOS", "Simulator")

_PARENTHESISED_RE = re.compile(r"\s*\(.*\)\s*")
_LAST_GROUP_RE = re.compile(r"\(([^()]*)\)\s*$")
_FIRST_GROUP_RE = re.compile(r"\(([^()]*)\)")


def _strip_parenthesised(line: str) -> str:
    """``"iPhone 15 (17.0) (ABC)"`` -> ``"iPhone 15"``."""
    return _PARENTHESISED_RE.sub("", line).strip()


def parse_adb_devices(output: str) -> list[DeviceInfo]:
    """Parse ``adb devices`` output into :class:`DeviceInfo` entries."""
    devices: list[DeviceInfo] = []
    for line in output.splitlines():
        if not line.strip() or "List of devices" in line:
            continue
        parts = line.strip().split("\t")
        if len(parts) >= 2:
            devices.append(DeviceInfo(id=parts[0], status=parts[1]))
    return devices


def parse_xctrace_devices(output: str) -> list[DeviceInfo]:
    """Parse ``xcrun xctrace list devices`` into physical devices.

    Headers, the host Mac and simulator lines are skipped.
    """
    devices: list[DeviceInfo] = []
    for line in output.splitlines():
        if not line.strip() or any(marker in line for marker in _XCTRACE_SKIP_MARKERS):
            continue
        name = _strip_parenthesised(line)
        if not name:
            continue
        match = _LAST_GROUP_RE.search(line)
        devices.append(
            DeviceInfo(
                id=name,
                status="connected",
                udid=match.group(1) if match else None,
            )
        )
    return devices


def parse_booted_simulators(output: str) -> list[DeviceInfo]:
    """Parse ``xcrun simctl list devices`` keeping only booted simulators."""
    simulators: list[DeviceInfo] = []
    for line in output.splitlines():
        if "Booted" not in line:
            continue
        name = _strip_parenthesised(line)
        if not name:
            continue
        match = _FIRST_GROUP_RE.search(line)
        simulators.append(
            DeviceInfo(
                id=name,
                status="booted",
                udid=match.group(1) if match else None,
            )
        )
    return simulators


def parse_udid_list(output: str) -> list[str]:
    """Parse ``idevice_id -l`` (one UDID per line)."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def match_physical_device(devices: list[DeviceInfo], udid: str) -> int | None:
    """Return the index of the device reported with *udid*, if any."""
    for index, device in enumerate(devices):
        if device.udid == udid or udid in device.id:
            return index
    return None
