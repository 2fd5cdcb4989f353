"""``rn-boilerplate icons`` — regenerate launcher icons and splash logos."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.console import log_gray, log_header, log_success
from rn_boilerplate.cli.spinner import Spinner
from rn_boilerplate.core.icons import (
    DEFAULT_COLORS,
    android_icon_targets,
    ios_icon_targets,
    splash_targets,
)
from rn_boilerplate.core.models import AssetTarget, IconColors
from rn_boilerplate.core.project_service import ProjectService
from rn_boilerplate.core.protocols import ProjectStore
from rn_boilerplate.infra.icon_renderer import PillowIconRenderer, write_assets
from rn_boilerplate.infra.manifest_store import JsonManifestStore


def _generate(
    label: str,
    renderer: PillowIconRenderer,
    targets: list[AssetTarget],
) -> None:
    spinner = Spinner(f"Generating {label}...").start()
    try:
        write_assets(renderer, targets)
    except Exception as exc:
        spinner.fail(f"Failed to generate {label}: {exc}")
        raise
    spinner.succeed(f"{label[0].upper()}{label[1:]} generated successfully")


def select_asset_groups(
    project_root: Path,
    ios_scheme: str,
    *,
    android: bool = False,
    ios: bool = False,
    splash: bool = False,
) -> list[tuple[str, Callable[[], list[AssetTarget]]]]:
    """Pick what to render; ``--splash`` wins over ``--android`` over ``--ios``."""
    groups: dict[str, tuple[str, Callable[[], list[AssetTarget]]]] = {
        "android": ("Android icons", lambda: android_icon_targets(project_root)),
        "ios": ("iOS icons", lambda: ios_icon_targets(project_root, ios_scheme)),
        "splash": ("splash screens", lambda: splash_targets(project_root, ios_scheme)),
    }
    if splash:
        return [groups["splash"]]
    if android:
        return [groups["android"]]
    if ios:
        return [groups["ios"]]
    return [groups["android"], groups["ios"], groups["splash"]]


def run_icons(
    *,
    android: bool = False,
    ios: bool = False,
    splash: bool = False,
    primary: str | None = None,
    background: str | None = None,
    destination: str | None = None,
    store: ProjectStore | None = None,
) -> int:
    """Dispatch the ``icons`` sub-command.

    Raises
    ------
    OptionalDependencyMissingError
        Pillow is not installed (checked before anything is written).
    InvalidColorError
        A colour option cannot be parsed.
    """
    service = ProjectService(store or JsonManifestStore())
    project_root = service.resolve(destination)
    identity = service.get_identity(project_root)

    colors = IconColors(
        primary=primary or DEFAULT_COLORS.primary,
        background=background or DEFAULT_COLORS.background,
    )

    log_header(f"Icon Generator for \"{identity.display_name}\"")
    log_gray(f"Primary color: {colors.primary}")
    log_gray(f"Background color: {colors.background}")

    renderer = PillowIconRenderer(colors)

    for label, plan in select_asset_groups(
        project_root,
        identity.ios_scheme,
        android=android,
        ios=ios,
        splash=splash,
    ):
        _generate(label, renderer, plan())

    log_success("\nIcon generation completed successfully!")
    return exit_codes.SUCCESS
