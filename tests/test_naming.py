"""Tests for core/naming.py — project-name grammar and manifest-safe names."""

from __future__ import annotations

import pytest

from rn_boilerplate.core.naming import (
    require_valid_project_name,
    to_manifest_safe,
    validate_project_name,
)
from rn_boilerplate.exceptions import InvalidProjectNameError


class TestValidateProjectName:
    @pytest.mark.parametrize(
        "name",
        ["MyProject", "my-project", "my_project", "Project123", "a"],
    )
    def test_accepts_valid_names(self, name: str) -> None:
        assert validate_project_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["123invalid", "-invalid", "_invalid", "invalid!", "invalid space", "", "app\n"],
    )
    def test_rejects_invalid_names(self, name: str) -> None:
        assert validate_project_name(name) is False

    def test_rejects_non_ascii_letters(self) -> None:
        assert validate_project_name("Café") is False


class TestRequireValidProjectName:
    def test_returns_name_unchanged(self) -> None:
        assert require_valid_project_name("MyApp") == "MyApp"

    def test_raises_with_hint(self) -> None:
        with pytest.raises(InvalidProjectNameError) as exc_info:
            require_valid_project_name("1app")
        assert exc_info.value.hint is not None
        assert "start with a letter" in exc_info.value.hint


class TestToManifestSafe:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("MyProject", "myproject"),
            ("My Project", "my-project"),
            ("my_awesome_app", "my-awesome-app"),
            ("Project@123!", "project-123-"),
            ("UPPERCASE", "uppercase"),
            ("a--b", "a--b"),
        ],
    )
    def test_transforms(self, raw: str, expected: str) -> None:
        assert to_manifest_safe(raw) == expected

    def test_length_is_preserved(self) -> None:
        raw = "Some Weird_Name!!"
        assert len(to_manifest_safe(raw)) == len(raw)

    def test_idempotent(self) -> None:
        once = to_manifest_safe("Hello World_2")
        assert to_manifest_safe(once) == once

    def test_runs_are_not_collapsed(self) -> None:
        assert to_manifest_safe("a  b") == "a--b"
