"""Manifest classification helpers (pure)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

MANIFEST_FILENAME: str = "package.json"
APP_DESCRIPTOR_FILENAME: str = "app.json"

# External tooling matches on this exact key.
FRAMEWORK_DEPENDENCY_KEY: str = "react-native"

DEPENDENCY_FIELDS: tuple[str, ...] = ("dependencies", "devDependencies")


def dependency_map(manifest: Mapping[str, Any], field: str) -> Mapping[str, Any]:
    """Return ``manifest[field]`` when it is a mapping, else an empty dict."""
    value = manifest.get(field)
    if isinstance(value, Mapping):
        return value
    return {}


def has_dependency(
    manifest: Mapping[str, Any],
    package: str,
    *,
    fields: tuple[str, ...] = DEPENDENCY_FIELDS,
) -> bool:
    """Return ``True`` iff *package* is a key of any of the *fields* mappings."""
    return any(package in dependency_map(manifest, name) for name in fields)


def is_framework_project(manifest: Mapping[str, Any]) -> bool:
    """Return ``True`` iff the manifest declares a react-native dependency.

    Both ``dependencies`` and ``devDependencies`` are inspected.
    """
    return has_dependency(manifest, FRAMEWORK_DEPENDENCY_KEY)
