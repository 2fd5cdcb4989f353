"""``rn-boilerplate refresh`` — clear watchman, node_modules and Metro caches."""

from __future__ import annotations

from pathlib import Path

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.console import log_error, log_header, log_success
from rn_boilerplate.cli.spinner import Spinner
from rn_boilerplate.core.project_service import ProjectService
from rn_boilerplate.core.protocols import CommandRunner, ProjectStore
from rn_boilerplate.exceptions import RnBoilerplateError
from rn_boilerplate.infra.manifest_store import JsonManifestStore
from rn_boilerplate.infra.process_runner import SubprocessRunner
from rn_boilerplate.infra.template import remove_directory

WATCHMAN_CLEAR_COMMAND: tuple[str, ...] = ("watchman", "watch-del-all")
NPM_INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")
START_RESET_CACHE_COMMAND: tuple[str, ...] = ("npm", "run", "start", "--", "--reset-cache")


def refresh_watchman(runner: CommandRunner) -> None:
    spinner = Spinner("Clearing watchman watches...").start()
    try:
        with spinner.paused():
            runner.run_interactive(WATCHMAN_CLEAR_COMMAND)
    except RnBoilerplateError as exc:
        spinner.fail(f"Failed to clear watchman watches: {exc}")
        raise
    spinner.succeed("Watchman watches cleared")


def refresh_modules(runner: CommandRunner, project_root: Path) -> None:
    spinner = Spinner("Cleaning and reinstalling node modules...").start()
    try:
        remove_directory(project_root / "node_modules")
        with spinner.paused():
            runner.run_interactive(NPM_INSTALL_COMMAND, cwd=project_root)
    except RnBoilerplateError as exc:
        spinner.fail(f"Failed to refresh node modules: {exc}")
        raise
    spinner.succeed("Node modules refreshed")


def refresh_start(runner: CommandRunner, project_root: Path) -> None:
    """Start Metro with a clean cache; blocks until Metro exits."""
    log_header("Starting React Native with cache reset...")
    try:
        runner.run_interactive(START_RESET_CACHE_COMMAND, cwd=project_root)
    except RnBoilerplateError as exc:
        log_error(f"Failed to start with cache reset: {exc}")
        raise


def run_refresh(
    *,
    watchman: bool = False,
    modules: bool = False,
    start: bool = False,
    destination: str | None = None,
    runner: CommandRunner | None = None,
    store: ProjectStore | None = None,
) -> int:
    """Dispatch the ``refresh`` sub-command.

    Without a flag, runs watchman, modules and start in that order.
    """
    project_root = ProjectService(store or JsonManifestStore()).resolve(destination)
    runner = runner or SubprocessRunner()

    if watchman:
        refresh_watchman(runner)
    elif modules:
        refresh_modules(runner, project_root)
    elif start:
        refresh_start(runner, project_root)
    else:
        log_header("Full refresh - this may take a while...")
        refresh_watchman(runner)
        refresh_modules(runner, project_root)
        refresh_start(runner, project_root)

    if not start:
        log_success("\nRefresh completed successfully!")
    return exit_codes.SUCCESS
