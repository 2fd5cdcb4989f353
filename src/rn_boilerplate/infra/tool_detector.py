"""Infrastructure: external tool detection and platform guidance.

Locates the command-line tools the CLI shells out to and provides
platform-specific installation guidance when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path



# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of probing PATH for one executable.

    Attributes
    ----------
    name : str
        Executable name that was looked up.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty
        when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Install guidance
# ---------------------------------------------------------------------------

# tool -> {platform.system().lower(): commands}; "*" applies everywhere
_INSTALL_GUIDANCE: dict[str, dict[str, tuple[str, ...]]] = {
    "node": {
        "darwin": ("brew install node",),
        "linux": ("sudo apt install nodejs npm", "nvm install --lts"),
        "windows": ("winget install OpenJS.NodeJS.LTS",),
    },
    "watchman": {
        "darwin": ("brew install watchman",),
        "*": ("See https://facebook.github.io/watchman/docs/install",),
    },
    "adb": {
        "darwin": ("brew install --cask android-platform-tools",),
        "linux": ("sudo apt install android-tools-adb",),
        "windows": ("winget install Google.PlatformTools",),
    },
    "xcrun": {
        "darwin": ("xcode-select --install",),
        "*": ("Xcode command line tools are only available on macOS",),
    },
    "ideviceinfo": {
        "darwin": ("brew install libimobiledevice",),
        "linux": ("sudo apt install libimobiledevice-utils",),
    },
}

# npm and npx ship with node.
_INSTALL_GUIDANCE["npm"] = _INSTALL_GUIDANCE["node"]
_INSTALL_GUIDANCE["npx"] = _INSTALL_GUIDANCE["node"]
_INSTALL_GUIDANCE["idevice_id"] = _INSTALL_GUIDANCE["ideviceinfo"]


def platform_install_commands(tool: str) -> tuple[str, ...]:
    """Return install commands for *tool* appropriate for the current OS."""
    guidance = _INSTALL_GUIDANCE.get(tool, {})
    system = platform.system().lower()
    if system in guidance:
        return guidance[system]
    if "*" in guidance:
        return guidance["*"]
    return (f"Install '{tool}' and make sure it is on your PATH",)


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name*.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)
    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )
    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=platform_install_commands(name),
    )


def install_hint(status: ToolStatus) -> str | None:
    if not status.install_commands:
        return None
    lines = [f"Install {status.name} using one of:"]
    lines.extend(f"  {cmd}" for cmd in status.install_commands)
    return "\n".join(lines)

