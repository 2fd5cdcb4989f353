"""Core project service — locates a project and derives its identity.

This is the service every command goes through before touching a
project.  It depends on a :class:`~rn_boilerplate.core.protocols.ProjectStore`
injected at construction time, keeping the core free of direct
filesystem access.

Guarantees
----------
* No ``print()``; no writes.
* Every lookup is recomputed from the store; nothing is cached.
* Read failures inside fallback chains never escape; only
  :meth:`ProjectService.resolve` raises, and only typed errors.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rn_boilerplate.core.manifest import FRAMEWORK_DEPENDENCY_KEY, is_framework_project
from rn_boilerplate.core.models import ProjectIdentity
from rn_boilerplate.core.protocols import ProjectStore
from rn_boilerplate.exceptions import (
    ManifestMissingError,
    NotFrameworkProjectError,
    NotInProjectError,
)

DEFAULT_PROJECT_NAME: str = "ExApp"

IOS_DIRNAME: str = "ios"

# Folders under ios/ that are never the native project folder.
IOS_EXCLUDED_DIRS: frozenset[str] = frozenset({"Pods", "build", "DerivedData"})


def _string_field(data: Mapping[str, Any], key: str) -> str | None:
    """Return ``data[key]`` when it is a non-empty string."""
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _descriptor_name(descriptor: Mapping[str, Any]) -> str | None:
    """``displayName`` first, then ``name``."""
    return _string_field(descriptor, "displayName") or _string_field(descriptor, "name")


class ProjectService:
    """Stateless service for project-root resolution and identity.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`ProjectStore` protocol.
    """

    def __init__(self, store: ProjectStore) -> None:
        self._store: ProjectStore = store

    # ------------------------------------------------------------------
    # Root finding
    # ------------------------------------------------------------------

    def is_project_root(self, path: Path) -> bool:
        """Return ``True`` when *path* holds a react-native ``package.json``.

        Unreadable manifests count as non-matching.
        """
        if not self._store.exists(path):
            return False
        manifest = self._store.try_read(path)
        return manifest is not None and is_framework_project(manifest)

    def find_root(self, start: Path | str | None = None) -> Path | None:
        """Walk upward from *start* (default: cwd) to the nearest project root.

        The filesystem root itself is not inspected.  Returns ``None``
        when no ancestor qualifies.
        """
        cursor = Path(os.path.abspath(start if start is not None else Path.cwd()))
        while cursor.parent != cursor:
            if self.is_project_root(cursor):
                return cursor
            cursor = cursor.parent
        return None

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def resolve(self, destination: Path | str | None = None) -> Path:
        """Return the validated project directory for a command.

        Parameters
        ----------
        destination:
            Explicit project path from ``--destination``.  When omitted,
            the nearest project above the working directory is used.

        Raises
        ------
        ManifestMissingError
            *destination* has no ``package.json``.
        NotFrameworkProjectError
            *destination*'s manifest does not depend on react-native.
        ManifestUnreadableError
            *destination*'s manifest exists but cannot be parsed.
        NotInProjectError
            No *destination* and no qualifying ancestor directory.
        """
        if destination is None or destination == "":
            found = self.find_root()
            if found is None:
                raise NotInProjectError(
                    "Not in a React Native project directory.",
                    hint="Use --destination to specify the project path.",
                )
            return found

        project_path = Path(os.path.abspath(destination))

        if not self._store.exists(project_path):
            raise ManifestMissingError(f"No package.json found at: {project_path}")

        manifest = self._store.read(project_path)
        if not is_framework_project(manifest):
            raise NotFrameworkProjectError(
                f"Not a React Native project: {project_path}",
                hint=f"package.json must list '{FRAMEWORK_DEPENDENCY_KEY}' "
                "in dependencies or devDependencies.",
            )
        return project_path

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def name_from_app_descriptor(self, path: Path) -> str | None:
        descriptor = self._store.try_read_app_descriptor(path)
        if descriptor is None:
            return None
        return _descriptor_name(descriptor)

    def name_from_manifest(self, path: Path) -> str | None:
        manifest = self._store.try_read(path)
        if manifest is None:
            return None
        return _string_field(manifest, "name")

    def get_name(self, path: Path | str) -> str:
        """Return the canonical project name.

        Sources, first hit wins: ``app.json`` ``displayName``,
        ``app.json`` ``name``, ``package.json`` ``name``, then
        ``"ExApp"``.
        """
        path = Path(path)
        # A readable app.json without either name field still falls through
        # to package.json before the default.
        return (
            self.name_from_app_descriptor(path)
            or self.name_from_manifest(path)
            or DEFAULT_PROJECT_NAME
        )

    def ios_scheme_candidates(self, path: Path) -> list[str]:
        """Return the folders under ``ios/`` that may be the native project.

        Sorted lexicographically so that several candidates resolve the
        same way on every platform.
        """
        entries = self._store.list_directories(path / IOS_DIRNAME)
        return sorted(entry for entry in entries if entry not in IOS_EXCLUDED_DIRS)

    def get_identity(self, path: Path | str) -> ProjectIdentity:
        """Derive the :class:`ProjectIdentity` of the project at *path*."""
        path = Path(path)
        name = self.get_name(path)
        display_name = self.name_from_app_descriptor(path) or name
        candidates = self.ios_scheme_candidates(path)
        ios_scheme = candidates[0] if candidates else name
        return ProjectIdentity(name=name, display_name=display_name, ios_scheme=ios_scheme)
