"""Domain models for rn-boilerplate.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They are rebuilt from disk on every
command invocation and never cached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


# ---------------------------------------------------------------------------
# Project identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectIdentity:
    """Names derived from a project's ``app.json``, ``package.json`` and ``ios/``."""

    name: str
    """Canonical project name (see :meth:`ProjectService.get_name`)."""

    display_name: str
    """Human-facing app name."""

    ios_scheme: str
    """Name of the native iOS project folder under ``ios/``."""


# ---------------------------------------------------------------------------
# Feature modules
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ModuleSpec:
    """An optional feature module shipped inside the template."""

    name: str
    """Package name the module is linked under in ``dependencies``."""

    path: Path
    """Absolute path of the module's local package directory."""

    dependencies: tuple[str, ...] = ()
    """Extra npm packages (with version specifiers) the module needs."""


# ---------------------------------------------------------------------------
# Devices
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """One attached device or running simulator."""

    id: str
    """Serial number (Android) or display name (iOS)."""

    status: str
    """Connection state reported by the platform tool."""

    udid: str | None = None
    """Hardware identifier when the platform tool reports one separately."""

    details: dict[str, str] = field(default_factory=dict)
    """Optional extra properties gathered with ``--details``."""


@dataclass(frozen=True, slots=True)
class IosDevices:
    """Physical iOS devices and booted simulators."""

    physical: tuple[DeviceInfo, ...] = ()
    simulators: tuple[DeviceInfo, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.physical or self.simulators)


# ---------------------------------------------------------------------------
# Icons
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IconColors:
    primary: str
    background: str


@dataclass(frozen=True, slots=True)
class AssetTarget:
    """One PNG file to render and where to put it."""

    path: Path
    size: int
    kind: str
    """``"icon"`` or ``"splash"``."""
