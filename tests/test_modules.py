"""Tests for core/modules.py and cli/modules_cmd.py.

npm is never run: the ``CommandRunner`` is a ``MagicMock`` and the test
asserts on the exact argument lists it receives.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, call, patch

import pytest

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.modules_cmd import ModuleManager, run_interactive_menu, run_modules
from rn_boilerplate.cli.prompts import build_module_choice_label
from rn_boilerplate.config import CliConfig
from rn_boilerplate.core.modules import (
    POD_INSTALL_COMMAND,
    build_module_catalog,
    expand_selection,
    is_module_linked,
    npm_install_command,
    npm_uninstall_command,
    strip_version,
)
from rn_boilerplate.exceptions import CommandFailedError, NotInProjectError
from rn_boilerplate.infra.manifest_store import JsonManifestStore

FLAGS = ("--legacy-peer-deps",)

CHAT = "md-chat-ai-screen"
REDUX = "md-redux-screen"
SKIA = "md-skia-accelerometer-screen"


def _linked_manifest(*names: str) -> dict[str, object]:
    deps: dict[str, str] = {"react-native": "0.74.0"}
    deps.update({name: f"file:modules/{name}" for name in names})
    return {"name": "sample-app", "dependencies": deps}


def _commands(runner: MagicMock) -> list[tuple[str, ...]]:
    return [tuple(c.args[0]) for c in runner.run_interactive.call_args_list]


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

class TestCatalog:
    def test_three_modules(self, tmp_path: Path) -> None:
        catalog = build_module_catalog(tmp_path)
        assert list(catalog) == [CHAT, REDUX, SKIA]

    def test_paths_are_under_project(self, tmp_path: Path) -> None:
        catalog = build_module_catalog(tmp_path)
        assert catalog[CHAT].path == tmp_path / "modules" / "chat-ai-screen"
        assert catalog[CHAT].dependencies == ("react-native-executorch@0.4.6",)
        assert catalog[REDUX].dependencies == ()


class TestLinkStatus:
    def test_runtime_dependency_only(self) -> None:
        assert is_module_linked({"dependencies": {REDUX: "1"}}, REDUX)
        assert not is_module_linked({"devDependencies": {REDUX: "1"}}, REDUX)

    def test_unreadable_manifest(self) -> None:
        assert is_module_linked(None, REDUX) is False


class TestSelection:
    def test_all(self, tmp_path: Path) -> None:
        catalog = build_module_catalog(tmp_path)
        assert expand_selection("all", catalog) == [CHAT, REDUX, SKIA]

    def test_single_unknown_is_kept(self, tmp_path: Path) -> None:
        assert expand_selection("md-nope", build_module_catalog(tmp_path)) == ["md-nope"]


class TestStripVersion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("react-native-executorch@0.4.6", "react-native-executorch"),
            ("lodash", "lodash"),
            ("@shopify/react-native-skia@1.2.3", "@shopify/react-native-skia"),
            ("@scope/pkg", "@scope/pkg"),
        ],
    )
    def test_strip(self, raw: str, expected: str) -> None:
        assert strip_version(raw) == expected


class TestNpmCommands:
    def test_install(self, tmp_path: Path) -> None:
        assert npm_install_command(tmp_path / "m", FLAGS) == (
            "npm", "install", str(tmp_path / "m"), "--save", "--legacy-peer-deps",
        )

    def test_uninstall(self) -> None:
        assert npm_uninstall_command(REDUX) == ("npm", "uninstall", REDUX, "--save")


class TestChoiceLabels:
    def test_enabling_linked(self) -> None:
        assert build_module_choice_label(REDUX, True, enabling=True) == f"{REDUX} (already linked)"

    def test_disabling_unlinked(self) -> None:
        assert build_module_choice_label(REDUX, False, enabling=False) == f"{REDUX} (already unlinked)"

    def test_plain(self) -> None:
        assert build_module_choice_label(REDUX, False, enabling=True) == REDUX


# ---------------------------------------------------------------------------
# ModuleManager
# ---------------------------------------------------------------------------

@pytest.fixture()
def manager_factory(
    make_project: Callable[..., Path], runner: MagicMock,
) -> Callable[..., ModuleManager]:
    def _make(*linked: str, confirm: bool = True) -> ModuleManager:
        root = make_project(manifest=_linked_manifest(*linked))
        return ModuleManager(
            root,
            runner=runner,
            store=JsonManifestStore(),
            npm_flags=FLAGS,
            confirm=lambda _message: confirm,
        )

    return _make


class TestEnable:
    def test_links_and_installs_dependencies(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory()
        manager.enable([CHAT])
        spec = manager.catalog[CHAT]
        assert _commands(runner) == [
            ("npm", "install", str(spec.path), "--save", *FLAGS),
            ("npm", "install", "react-native-executorch@0.4.6", "--save", *FLAGS),
            POD_INSTALL_COMMAND,
        ]
        for recorded in runner.run_interactive.call_args_list:
            assert recorded.kwargs["cwd"] == manager.project_root

    def test_already_linked_skips_link(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory(REDUX)
        manager.enable([REDUX])
        runner.run_interactive.assert_not_called()

    def test_already_linked_still_installs_dependencies(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory(CHAT)
        manager.enable([CHAT])
        assert _commands(runner) == [
            ("npm", "install", "react-native-executorch@0.4.6", "--save", *FLAGS),
            POD_INSTALL_COMMAND,
        ]

    def test_unknown_module_is_skipped(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory()
        manager.enable(["md-nope", REDUX])
        assert _commands(runner) == [
            ("npm", "install", str(manager.catalog[REDUX].path), "--save", *FLAGS),
        ]

    def test_link_failure_propagates_with_context(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        runner.run_interactive.side_effect = CommandFailedError(
            "Command failed: npm install", command=("npm", "install"), returncode=1,
        )
        manager = manager_factory()
        with pytest.raises(CommandFailedError) as exc_info:
            manager.enable([REDUX])
        assert str(exc_info.value).startswith(f"Error linking module {REDUX}")
        assert exc_info.value.returncode == 1

    def test_pod_install_failure_only_warns(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        def _fail_pods(command: tuple[str, ...], *, cwd: Path | None = None) -> None:
            if tuple(command) == POD_INSTALL_COMMAND:
                raise CommandFailedError("pods", command=tuple(command), returncode=1)

        runner.run_interactive.side_effect = _fail_pods
        manager = manager_factory()
        manager.enable([CHAT])
        assert _commands(runner)[-1] == POD_INSTALL_COMMAND


class TestDisable:
    def test_unlinks_and_removes_dependencies(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory(CHAT)
        manager.disable([CHAT])
        assert _commands(runner) == [
            ("npm", "uninstall", CHAT, "--save", *FLAGS),
            ("npm", "uninstall", "react-native-executorch", "--save", *FLAGS),
            POD_INSTALL_COMMAND,
        ]

    def test_declined_confirmation_keeps_dependencies(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory(CHAT, confirm=False)
        manager.disable([CHAT])
        assert _commands(runner) == [("npm", "uninstall", CHAT, "--save", *FLAGS)]

    def test_already_unlinked(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory()
        manager.disable([SKIA])
        runner.run_interactive.assert_not_called()

    def test_status_reads_disk_each_time(
        self, manager_factory: Callable[..., ModuleManager],
    ) -> None:
        manager = manager_factory(REDUX)
        assert manager.link_status() == {CHAT: False, REDUX: True, SKIA: False}
        (manager.project_root / "package.json").write_text(
            json.dumps(_linked_manifest(SKIA)), encoding="utf-8",
        )
        assert manager.link_status() == {CHAT: False, REDUX: False, SKIA: True}


# ---------------------------------------------------------------------------
# Command entry points
# ---------------------------------------------------------------------------

class TestRunModules:
    def test_status(
        self, make_project: Callable[..., Path], runner: MagicMock, config: CliConfig,
    ) -> None:
        root = make_project()
        code = run_modules(config=config, status=True, destination=str(root), runner=runner)
        assert code == exit_codes.SUCCESS
        runner.run_interactive.assert_not_called()

    def test_enable_all(
        self, make_project: Callable[..., Path], runner: MagicMock, config: CliConfig,
    ) -> None:
        root = make_project()
        code = run_modules(config=config, enable="all", destination=str(root), runner=runner)
        assert code == exit_codes.SUCCESS
        module_paths = {str(spec.path) for spec in build_module_catalog(root).values()}
        linked = [cmd for cmd in _commands(runner) if cmd[:2] == ("npm", "install") and cmd[2] in module_paths]
        assert len(linked) == 3

    def test_outside_project(
        self,
        runner: MagicMock,
        config: CliConfig,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(NotInProjectError):
            run_modules(config=config, status=True, runner=runner)


class TestInteractiveMenu:
    def test_exit(self, manager_factory: Callable[..., ModuleManager], runner: MagicMock) -> None:
        with patch("rn_boilerplate.cli.prompts.prompt_action", return_value="exit"):
            assert run_interactive_menu(manager_factory(), "Shop") == exit_codes.SUCCESS
        runner.run_interactive.assert_not_called()

    def test_enable_selected(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        manager = manager_factory()
        with patch("rn_boilerplate.cli.prompts.prompt_action", return_value="enable"), patch(
            "rn_boilerplate.cli.prompts.prompt_modules", return_value=[REDUX],
        ) as mock_prompt:
            run_interactive_menu(manager, "Shop")
        assert mock_prompt.call_args == call(
            {CHAT: False, REDUX: False, SKIA: False}, enabling=True,
        )
        assert _commands(runner) == [
            ("npm", "install", str(manager.catalog[REDUX].path), "--save", *FLAGS),
        ]

    def test_empty_selection_does_nothing(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        with patch("rn_boilerplate.cli.prompts.prompt_action", return_value="disable"), patch(
            "rn_boilerplate.cli.prompts.prompt_modules", return_value=[],
        ):
            run_interactive_menu(manager_factory(REDUX), "Shop")
        runner.run_interactive.assert_not_called()

    def test_disable_all(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        with patch("rn_boilerplate.cli.prompts.prompt_action", return_value="disable_all"):
            run_interactive_menu(manager_factory(REDUX, SKIA, confirm=False), "Shop")
        assert _commands(runner) == [
            ("npm", "uninstall", REDUX, "--save", *FLAGS),
            ("npm", "uninstall", SKIA, "--save", *FLAGS),
        ]

    def test_disable_all_offers_dependencies_of_unlinked_module(
        self, manager_factory: Callable[..., ModuleManager], runner: MagicMock,
    ) -> None:
        with patch("rn_boilerplate.cli.prompts.prompt_action", return_value="disable_all"):
            run_interactive_menu(manager_factory(REDUX, SKIA), "Shop")
        assert _commands(runner) == [
            ("npm", "uninstall", "react-native-executorch", "--save", *FLAGS),
            POD_INSTALL_COMMAND,
            ("npm", "uninstall", REDUX, "--save", *FLAGS),
            ("npm", "uninstall", SKIA, "--save", *FLAGS),
        ]
