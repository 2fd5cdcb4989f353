"""Shared pytest fixtures and configuration for the rn-boilerplate test suite.

Guidelines
----------
* No network access and no real npm / adb / xcrun in any test.
* External commands are mocked at the ``CommandRunner`` boundary.
* Core tests must be pure — no side effects.
* Filesystem fixtures live under ``tmp_path``.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from rn_boilerplate.config import CliConfig
from rn_boilerplate.infra.manifest_store import JsonManifestStore

RN_MANIFEST: dict[str, Any] = {
    "name": "sample-app",
    "version": "0.0.1",
    "dependencies": {"react": "18.2.0", "react-native": "0.74.0"},
}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def store() -> JsonManifestStore:
    return JsonManifestStore()


@pytest.fixture()
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a React Native project directory under ``tmp_path``."""

    def _make(
        name: str = "SampleApp",
        *,
        manifest: dict[str, Any] | None = None,
        app_json: dict[str, Any] | None = None,
        ios_dirs: tuple[str, ...] = (),
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        write_json(root / "package.json", RN_MANIFEST if manifest is None else manifest)
        if app_json is not None:
            write_json(root / "app.json", app_json)
        for folder in ios_dirs:
            (root / "ios" / folder).mkdir(parents=True, exist_ok=True)
        return root

    return _make


@pytest.fixture()
def runner() -> MagicMock:
    """A ``CommandRunner`` double where every tool exists and succeeds."""
    mock = MagicMock()
    mock.run.return_value = ""
    mock.run_interactive.return_value = None
    mock.is_available.return_value = True
    return mock


@pytest.fixture()
def config(tmp_path: Path) -> CliConfig:
    """Config whose ``templates/`` holds a minimal default template."""
    base = tmp_path / "install"
    template = base / "templates" / "react-native-template-v1.0.0"
    write_json(
        template / "package.json",
        {"name": "exapp", "dependencies": {"react-native": "0.74.0"}},
    )
    write_json(template / "app.json", {"name": "ExApp", "displayName": "ExApp"})
    (template / "ios" / "ExApp").mkdir(parents=True)
    (template / "node_modules" / "left-pad").mkdir(parents=True)
    (template / "node_modules" / "left-pad" / "index.js").write_text("", encoding="utf-8")
    return CliConfig(base_dir=base)
