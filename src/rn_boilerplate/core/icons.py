"""Icon and splash-screen asset plans.

Maps a project root to the list of PNG files the ``icons`` command
writes.  Pure: no rendering, no filesystem access.
"""

from __future__ import annotations

from pathlib import Path

from rn_boilerplate.core.models import AssetTarget, IconColors

DEFAULT_COLORS = IconColors(primary="#1976D2", background="#FFFFFF")

# density folder -> launcher icon edge in px
ANDROID_ICON_SIZES: dict[str, int] = {
    "mipmap-mdpi": 48,
    "mipmap-hdpi": 72,
    "mipmap-xhdpi": 96,
    "mipmap-xxhdpi": 144,
    "mipmap-xxxhdpi": 192,
}

ANDROID_ICON_FILENAMES: tuple[str, ...] = ("ic_launcher.png", "ic_launcher_round.png")

IOS_ICON_SIZES: dict[str, int] = {
    "Icon-20@2x.png": 40,
    "Icon-20@3x.png": 60,
    "Icon-29@2x.png": 58,
    "Icon-29@3x.png": 87,
    "Icon-40@2x.png": 80,
    "Icon-40@3x.png": 120,
    "Icon-60@2x.png": 120,
    "Icon-60@3x.png": 180,
    "Icon-76@2x.png": 152,
    "Icon-83.5@2x.png": 167,
    "Icon-1024.png": 1024,
}

IOS_SPLASH_SIZES: dict[str, int] = {
    "splash-logo.png": 100,
    "splash-logo@2x.png": 200,
    "splash-logo@3x.png": 300,
}

ANDROID_SPLASH_FILENAME: str = "splashscreen_logo.png"


def android_res_dir(project_root: Path) -> Path:
    return project_root / "android" / "app" / "src" / "main" / "res"


def ios_assets_dir(project_root: Path, ios_scheme: str) -> Path:
    return project_root / "ios" / ios_scheme / "Images.xcassets"


def android_icon_targets(project_root: Path) -> list[AssetTarget]:
    res_dir = android_res_dir(project_root)
    return [
        AssetTarget(path=res_dir / folder / filename, size=size, kind="icon")
        for folder, size in ANDROID_ICON_SIZES.items()
        for filename in ANDROID_ICON_FILENAMES
    ]


def ios_icon_targets(project_root: Path, ios_scheme: str) -> list[AssetTarget]:
    icon_dir = ios_assets_dir(project_root, ios_scheme) / "AppIcon.appiconset"
    return [
        AssetTarget(path=icon_dir / filename, size=size, kind="icon")
        for filename, size in IOS_ICON_SIZES.items()
    ]


def splash_targets(project_root: Path, ios_scheme: str) -> list[AssetTarget]:
    """Android ``drawable-*`` splash logos followed by the iOS image set."""
    res_dir = android_res_dir(project_root)
    targets = [
        AssetTarget(
            path=res_dir / folder.replace("mipmap", "drawable") / ANDROID_SPLASH_FILENAME,
            size=size,
            kind="splash",
        )
        for folder, size in ANDROID_ICON_SIZES.items()
    ]
    splash_dir = ios_assets_dir(project_root, ios_scheme) / "SplashScreenLogo.imageset"
    targets.extend(
        AssetTarget(path=splash_dir / filename, size=size, kind="splash")
        for filename, size in IOS_SPLASH_SIZES.items()
    )
    return targets
