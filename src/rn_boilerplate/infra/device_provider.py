"""Android and iOS device enumeration through platform tools.

Each provider checks its tool up front and raises
:class:`~rn_boilerplate.exceptions.ToolNotFoundError` when it is
missing; per-device detail queries that fail are skipped silently so
one flaky device never hides the rest of the list.
"""

from __future__ import annotations

from dataclasses import replace

from rn_boilerplate.core.devices import (
    ANDROID_DETAIL_PROPS,
    ANDROID_READY_STATUS,
    IOS_DETAIL_KEYS,
    match_physical_device,
    parse_adb_devices,
    parse_booted_simulators,
    parse_udid_list,
    parse_xctrace_devices,
)
from rn_boilerplate.core.models import DeviceInfo, IosDevices
from rn_boilerplate.core.protocols import CommandRunner
from rn_boilerplate.exceptions import CommandFailedError, ToolNotFoundError
from rn_boilerplate.infra.tool_detector import ToolStatus, install_hint, platform_install_commands


def _missing_tool(name: str, message: str) -> ToolNotFoundError:
    status = ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=platform_install_commands(name),
    )
    return ToolNotFoundError(message, hint=install_hint(status))


class AndroidDeviceProvider:
    """Lists devices known to ``adb``."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    def list_devices(self, *, details: bool = False) -> list[DeviceInfo]:
        """Return attached Android devices.

        Raises
        ------
        ToolNotFoundError
            When ``adb`` is not on PATH.
        CommandFailedError
            When ``adb`` itself fails.
        """
        if not self._runner.is_available("adb"):
            raise _missing_tool("adb", "ADB is not installed or not in PATH.")

        self._runner.run(["adb", "start-server"])
        devices = parse_adb_devices(self._runner.run(["adb", "devices"]))

        if not details:
            return devices
        return [
            self._with_details(device) if device.status == ANDROID_READY_STATUS else device
            for device in devices
        ]

    def _with_details(self, device: DeviceInfo) -> DeviceInfo:
        info: dict[str, str] = {}
        try:
            for key, prop in ANDROID_DETAIL_PROPS.items():
                info[key] = self._runner.run(
                    ["adb", "-s", device.id, "shell", "getprop", prop]
                ).strip()
        except CommandFailedError:
            return device
        return replace(device, details=info)


class IosDeviceProvider:
    """Lists physical iOS devices and booted simulators via ``xcrun``."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner: CommandRunner = runner

    def details_supported(self) -> bool:
        """``True`` when libimobiledevice is installed."""
        return self._runner.is_available("ideviceinfo")

    def list_devices(self, *, details: bool = False) -> IosDevices:
        """Return physical devices and booted simulators.

        Each listing is independent: a failing ``xctrace`` call still
        lets simulators through, and vice versa.

        Raises
        ------
        ToolNotFoundError
            When ``xcrun`` is not on PATH.
        """
        if not self._runner.is_available("xcrun"):
            raise _missing_tool("xcrun", "xcrun is not installed or not in PATH.")

        try:
            physical = parse_xctrace_devices(
                self._runner.run(["xcrun", "xctrace", "list", "devices"])
            )
        except CommandFailedError:
            physical = []

        try:
            simulators = parse_booted_simulators(
                self._runner.run(["xcrun", "simctl", "list", "devices"])
            )
        except CommandFailedError:
            simulators = []

        if details and physical and self.details_supported():
            physical = self._with_details(physical)

        return IosDevices(physical=tuple(physical), simulators=tuple(simulators))

    def _with_details(self, devices: list[DeviceInfo]) -> list[DeviceInfo]:
        try:
            udids = parse_udid_list(self._runner.run(["idevice_id", "-l"]))
        except CommandFailedError:
            return devices

        result = list(devices)
        for udid in udids:
            index = match_physical_device(result, udid)
            if index is None:
                continue
            info: dict[str, str] = {}
            try:
                for key, info_key in IOS_DETAIL_KEYS.items():
                    info[key] = self._runner.run(
                        ["ideviceinfo", "-u", udid, "-k", info_key]
                    ).strip()
            except CommandFailedError:
                continue
            result[index] = replace(result[index], details=info)
        return result
