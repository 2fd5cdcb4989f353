"""JSON-file backed implementation of :class:`~rn_boilerplate.core.protocols.ProjectStore`.

This module is the **only** place in the codebase that reads or writes
``package.json`` / ``app.json``.  ``OSError`` and JSON decoding errors
are caught here and re-raised as
:class:`~rn_boilerplate.exceptions.ManifestUnreadableError`, or turned
into ``None`` by the ``try_*`` variants.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rn_boilerplate.core.manifest import APP_DESCRIPTOR_FILENAME, MANIFEST_FILENAME
from rn_boilerplate.exceptions import ManifestUnreadableError


def _load_json_object(file_path: Path) -> dict[str, Any]:
    """Parse *file_path* and require a top-level JSON object."""
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestUnreadableError(f"Cannot read {file_path}: {exc}") from exc

    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestUnreadableError(
            f"Invalid JSON in {file_path}: {exc}",
            hint="Fix the syntax error and retry.",
        ) from exc

    if not isinstance(data, dict):
        raise ManifestUnreadableError(f"Expected a JSON object in {file_path}")
    return data


class JsonManifestStore:
    """Concrete :class:`ProjectStore` reading JSON files from disk.

    This class satisfies the :class:`~rn_boilerplate.core.protocols.ProjectStore`
    protocol structurally — no explicit inheritance required.
    """

    @staticmethod
    def manifest_path(path: Path) -> Path:
        return Path(path) / MANIFEST_FILENAME

    @staticmethod
    def app_descriptor_path(path: Path) -> Path:
        return Path(path) / APP_DESCRIPTOR_FILENAME

    # ------------------------------------------------------------------
    # package.json
    # ------------------------------------------------------------------

    def exists(self, path: Path) -> bool:
        return self.manifest_path(path).is_file()

    def read(self, path: Path) -> dict[str, Any]:
        """Parse ``package.json`` under *path*.

        Raises
        ------
        ManifestUnreadableError
            Missing file, malformed JSON, or a non-object document.
        """
        return _load_json_object(self.manifest_path(path))

    def try_read(self, path: Path) -> dict[str, Any] | None:
        try:
            return self.read(path)
        except ManifestUnreadableError:
            return None

    def write(self, path: Path, manifest: dict[str, Any]) -> None:
        """Overwrite ``package.json`` with two-space indentation."""
        target = self.manifest_path(path)
        text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ManifestUnreadableError(f"Cannot write {target}: {exc}") from exc

    # ------------------------------------------------------------------
    # app.json
    # ------------------------------------------------------------------

    def read_app_descriptor(self, path: Path) -> dict[str, Any]:
        return _load_json_object(self.app_descriptor_path(path))

    def try_read_app_descriptor(self, path: Path) -> dict[str, Any] | None:
        try:
            return self.read_app_descriptor(path)
        except ManifestUnreadableError:
            return None

    # ------------------------------------------------------------------
    # Directory listing
    # ------------------------------------------------------------------

    @staticmethod
    def list_directories(path: Path) -> list[str]:
        """Return sorted names of the sub-directories of *path*.

        A missing or unreadable *path* yields ``[]``; entries whose stat
        fails are skipped.
        """
        try:
            entries = list(Path(path).iterdir())
        except OSError:
            return []

        names: list[str] = []
        for entry in entries:
            try:
                if entry.is_dir():
                    names.append(entry.name)
            except OSError:
                continue
        return sorted(names)
