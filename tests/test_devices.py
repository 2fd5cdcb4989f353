"""Tests for core/devices.py, infra/device_provider.py and cli/devices_cmd.py.

All platform tools are simulated through a ``MagicMock`` runner whose
``run`` answers by command.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.devices_cmd import collect_android, collect_ios, run_devices
from rn_boilerplate.core.devices import (
    match_physical_device,
    parse_adb_devices,
    parse_booted_simulators,
    parse_udid_list,
    parse_xctrace_devices,
)
from rn_boilerplate.core.models import DeviceInfo, IosDevices
from rn_boilerplate.exceptions import CommandFailedError, ToolNotFoundError
from rn_boilerplate.infra.device_provider import AndroidDeviceProvider, IosDeviceProvider

ADB_OUTPUT = """List of devices attached
emulator-5554\tdevice
R58M123ABC\tunauthorized

"""

XCTRACE_OUTPUT = """== Devices ==
Studio Mac (macOS 14.4) (0000-HOST)
Ana's iPhone (17.4.1) (00008110-001A2B3C4D5E)

== Simulators ==
iPhone 15 Simulator (17.4) (5F2C1D44-AAAA-BBBB-CCCC-0123456789AB)
"""

SIMCTL_OUTPUT = """== Devices ==
-- iOS 17.4 --
    iPhone 15 (5F2C1D44-AAAA-BBBB-CCCC-0123456789AB) (Booted)
    iPhone 15 Pro (11111111-2222-3333-4444-555555555555) (Shutdown)
    iPad Air (99999999-8888-7777-6666-555555555555) (Booted)
"""


def _scripted_runner(
    answers: dict[tuple[str, ...], str | Exception],
    *,
    available: Sequence[str] = ("adb", "xcrun", "idevice_id", "ideviceinfo"),
) -> MagicMock:
    """Runner whose ``run`` looks answers up by command prefix."""

    def _run(args: Sequence[str], *, cwd: Path | None = None) -> str:
        command = tuple(args)
        for prefix, answer in answers.items():
            if command[: len(prefix)] == prefix:
                if isinstance(answer, Exception):
                    raise answer
                return answer
        return ""

    runner = MagicMock()
    runner.run.side_effect = _run
    runner.is_available.side_effect = lambda program: program in available
    return runner


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

class TestParseAdb:
    def test_devices_with_status(self) -> None:
        devices = parse_adb_devices(ADB_OUTPUT)
        assert devices == [
            DeviceInfo(id="emulator-5554", status="device"),
            DeviceInfo(id="R58M123ABC", status="unauthorized"),
        ]

    def test_header_only(self) -> None:
        assert parse_adb_devices("List of devices attached\n\n") == []


class TestParseXctrace:
    def test_physical_devices_only(self) -> None:
        devices = parse_xctrace_devices(XCTRACE_OUTPUT)
        assert len(devices) == 1
        assert devices[0].id == "Ana's iPhone"
        assert devices[0].udid == "00008110-001A2B3C4D5E"
        assert devices[0].status == "connected"

    def test_empty(self) -> None:
        assert parse_xctrace_devices("") == []


class TestParseSimctl:
    def test_booted_only(self) -> None:
        simulators = parse_booted_simulators(SIMCTL_OUTPUT)
        assert [sim.id for sim in simulators] == ["iPhone 15", "iPad Air"]
        assert simulators[0].udid == "5F2C1D44-AAAA-BBBB-CCCC-0123456789AB"


class TestUdidHelpers:
    def test_parse_udid_list(self) -> None:
        assert parse_udid_list("abc\n\n  def  \n") == ["abc", "def"]

    def test_match_by_udid(self) -> None:
        devices = [DeviceInfo(id="Phone", status="connected", udid="U1")]
        assert match_physical_device(devices, "U1") == 0
        assert match_physical_device(devices, "U2") is None


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

class TestAndroidProvider:
    def test_missing_adb(self) -> None:
        runner = _scripted_runner({}, available=())
        with pytest.raises(ToolNotFoundError) as exc_info:
            AndroidDeviceProvider(runner).list_devices()
        assert exc_info.value.hint is not None

    def test_lists_devices(self) -> None:
        runner = _scripted_runner({("adb", "devices"): ADB_OUTPUT})
        devices = AndroidDeviceProvider(runner).list_devices()
        assert [device.id for device in devices] == ["emulator-5554", "R58M123ABC"]
        assert all(device.details == {} for device in devices)

    def test_details_only_for_ready_devices(self) -> None:
        runner = _scripted_runner(
            {
                ("adb", "devices"): ADB_OUTPUT,
                ("adb", "-s", "emulator-5554", "shell", "getprop", "ro.product.model"): "Pixel 8\n",
                ("adb", "-s", "emulator-5554", "shell", "getprop", "ro.build.version.sdk"): "34\n",
            }
        )
        ready, unauthorized = AndroidDeviceProvider(runner).list_devices(details=True)
        assert ready.details["model"] == "Pixel 8"
        assert ready.details["apiLevel"] == "34"
        assert unauthorized.details == {}

    def test_failed_detail_query_keeps_device(self) -> None:
        runner = _scripted_runner(
            {
                ("adb", "devices"): ADB_OUTPUT,
                ("adb", "-s"): CommandFailedError("offline"),
            }
        )
        devices = AndroidDeviceProvider(runner).list_devices(details=True)
        assert len(devices) == 2
        assert devices[0].details == {}


class TestIosProvider:
    def test_missing_xcrun(self) -> None:
        runner = _scripted_runner({}, available=("adb",))
        with pytest.raises(ToolNotFoundError):
            IosDeviceProvider(runner).list_devices()

    def test_physical_and_simulators(self) -> None:
        runner = _scripted_runner(
            {
                ("xcrun", "xctrace"): XCTRACE_OUTPUT,
                ("xcrun", "simctl"): SIMCTL_OUTPUT,
            }
        )
        devices = IosDeviceProvider(runner).list_devices()
        assert [d.id for d in devices.physical] == ["Ana's iPhone"]
        assert [d.id for d in devices.simulators] == ["iPhone 15", "iPad Air"]

    def test_xctrace_failure_keeps_simulators(self) -> None:
        runner = _scripted_runner(
            {
                ("xcrun", "xctrace"): CommandFailedError("xctrace"),
                ("xcrun", "simctl"): SIMCTL_OUTPUT,
            }
        )
        devices = IosDeviceProvider(runner).list_devices()
        assert devices.physical == ()
        assert len(devices.simulators) == 2

    def test_details_from_ideviceinfo(self) -> None:
        runner = _scripted_runner(
            {
                ("xcrun", "xctrace"): XCTRACE_OUTPUT,
                ("xcrun", "simctl"): "",
                ("idevice_id", "-l"): "00008110-001A2B3C4D5E\n",
                ("ideviceinfo", "-u", "00008110-001A2B3C4D5E", "-k", "ProductVersion"): "17.4.1\n",
            }
        )
        devices = IosDeviceProvider(runner).list_devices(details=True)
        assert devices.physical[0].details["iosVersion"] == "17.4.1"

    def test_no_details_without_libimobiledevice(self) -> None:
        runner = _scripted_runner(
            {("xcrun", "xctrace"): XCTRACE_OUTPUT},
            available=("xcrun",),
        )
        devices = IosDeviceProvider(runner).list_devices(details=True)
        assert devices.physical[0].details == {}
        called = [tuple(c.args[0])[0] for c in runner.run.call_args_list]
        assert "idevice_id" not in called


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class TestRunDevices:
    def test_missing_tools_still_succeed(self, capsys: pytest.CaptureFixture[str]) -> None:
        runner = _scripted_runner({}, available=())
        assert run_devices(runner=runner) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "ADB is not installed" in err
        assert "xcrun is not installed" in err

    def test_android_only_skips_ios(self) -> None:
        runner = _scripted_runner({("adb", "devices"): ADB_OUTPUT})
        run_devices(android=True, runner=runner)
        programs = {tuple(c.args[0])[0] for c in runner.run.call_args_list}
        assert programs == {"adb"}

    def test_ios_only_skips_android(self) -> None:
        runner = _scripted_runner({("xcrun", "simctl"): SIMCTL_OUTPUT})
        run_devices(ios=True, runner=runner)
        programs = {tuple(c.args[0])[0] for c in runner.run.call_args_list}
        assert programs == {"xcrun"}

    def test_lists_devices(self, capsys: pytest.CaptureFixture[str]) -> None:
        runner = _scripted_runner(
            {
                ("adb", "devices"): ADB_OUTPUT,
                ("xcrun", "xctrace"): XCTRACE_OUTPUT,
                ("xcrun", "simctl"): SIMCTL_OUTPUT,
            }
        )
        assert run_devices(runner=runner) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "emulator-5554" in err
        assert "Ana's iPhone" in err
        assert "iPad Air" in err

    def test_adb_failure_is_reported(self) -> None:
        runner = _scripted_runner({("adb", "devices"): CommandFailedError("daemon")})
        assert collect_android(runner, False) == []

    def test_collect_ios_missing_tool(self) -> None:
        runner = _scripted_runner({}, available=())
        assert collect_ios(runner, False) == IosDevices()
