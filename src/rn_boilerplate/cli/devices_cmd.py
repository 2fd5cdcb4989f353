"""``rn-boilerplate devices`` — list attached Android and iOS devices.

Missing platform tools are reported with install hints but never fail
the command: a machine without Xcode can still list Android devices.
"""

from __future__ import annotations

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.console import (
    console,
    escape_markup,
    log_error,
    log_gray,
    log_header,
    log_plain,
    log_warning,
)
from rn_boilerplate.core.models import DeviceInfo, IosDevices
from rn_boilerplate.core.protocols import CommandRunner
from rn_boilerplate.exceptions import CommandFailedError, ToolNotFoundError
from rn_boilerplate.infra.device_provider import AndroidDeviceProvider, IosDeviceProvider
from rn_boilerplate.infra.process_runner import SubprocessRunner

RULE = "=" * 40
DIVIDER = "-" * 38

ANDROID_DETAIL_LABELS: dict[str, str] = {
    "model": "Model",
    "android": "Android",
    "apiLevel": "API Level",
    "brand": "Brand",
    "device": "Device",
}

IOS_DETAIL_LABELS: dict[str, str] = {
    "productName": "Product Name",
    "iosVersion": "iOS Version",
    "deviceName": "Device Name",
    "model": "Model",
    "hardware": "Hardware",
}


def _banner(title: str) -> None:
    log_header(RULE)
    log_header(title.center(len(RULE)).rstrip())
    log_header(RULE)


def _print_details(details: dict[str, str], labels: dict[str, str]) -> None:
    width = max(len(label) for label in labels.values()) + 1
    for key, label in labels.items():
        if key in details:
            log_gray(f"  • {label + ':':<{width}} {details[key]}")
    log_plain()


def _report_missing(exc: ToolNotFoundError) -> None:
    log_error(str(exc))
    if exc.hint:
        log_warning(exc.hint)


# ---------------------------------------------------------------------------
# Collectors (never raise)
# ---------------------------------------------------------------------------

def collect_android(runner: CommandRunner, details: bool) -> list[DeviceInfo]:
    try:
        return AndroidDeviceProvider(runner).list_devices(details=details)
    except ToolNotFoundError as exc:
        _report_missing(exc)
    except CommandFailedError:
        log_error("Failed to list Android devices")
    return []


def collect_ios(runner: CommandRunner, details: bool) -> IosDevices:
    try:
        return IosDeviceProvider(runner).list_devices(details=details)
    except ToolNotFoundError as exc:
        _report_missing(exc)
    return IosDevices()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def print_android_devices(devices: list[DeviceInfo], details: bool) -> None:
    _banner("CONNECTED ANDROID DEVICES")
    if not devices:
        log_warning("No Android devices connected.")
        return

    log_plain(f"{'DEVICE ID':<31} STATUS")
    log_gray(DIVIDER)
    for device in devices:
        color = "green" if device.status == "device" else "yellow"
        device_id = escape_markup(f"{device.id:<30}")
        console.print(f"[cyan]{device_id}[/cyan] [{color}]{device.status}[/{color}]")
        if details and device.details:
            _print_details(device.details, ANDROID_DETAIL_LABELS)


def print_ios_devices(devices: IosDevices, details: bool, *, details_supported: bool) -> None:
    _banner("CONNECTED IOS DEVICES")
    if not devices:
        log_warning("No iOS devices or simulators detected.")
        return

    if devices.physical:
        log_plain("PHYSICAL DEVICES")
        log_gray(DIVIDER)
        for device in devices.physical:
            console.print(f"[cyan]{escape_markup(device.id)}[/cyan]")
            if details and device.details:
                _print_details(device.details, IOS_DETAIL_LABELS)

    if devices.simulators:
        log_plain("RUNNING SIMULATORS")
        log_gray(DIVIDER)
        for device in devices.simulators:
            console.print(f"[cyan]{escape_markup(device.id)}[/cyan]")

    if details and devices.physical and not details_supported:
        log_warning("\nFor detailed device information, install libimobiledevice:")
        log_plain("  brew install libimobiledevice")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_devices(
    *,
    details: bool = False,
    android: bool = False,
    ios: bool = False,
    runner: CommandRunner | None = None,
) -> int:
    """List devices; always returns :data:`exit_codes.SUCCESS`."""
    runner = runner or SubprocessRunner()

    log_header("Device Manager\n")

    show_android = android or not ios
    show_ios = ios or not android

    android_devices = collect_android(runner, details) if show_android else []
    ios_devices = collect_ios(runner, details) if show_ios else IosDevices()

    if show_android:
        print_android_devices(android_devices, details)
    if show_android and show_ios:
        log_plain()
    if show_ios:
        print_ios_devices(
            ios_devices,
            details,
            details_supported=runner.is_available("ideviceinfo"),
        )

    if details:
        log_gray("\nTip: Run without --details flag for a quick overview")
    else:
        log_gray("\nTip: Use --details flag for more information")
    return exit_codes.SUCCESS
