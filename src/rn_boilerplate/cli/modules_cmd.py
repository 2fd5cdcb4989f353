"""``rn-boilerplate modules`` — link, unlink and inspect feature modules.

A module is "enabled" when its local package is installed into the
project's ``dependencies``.  Enabling also installs the module's extra
npm packages; disabling offers to remove them.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.console import console, log_gray, log_header, log_info, log_success, log_warning
from rn_boilerplate.cli.spinner import Spinner
from rn_boilerplate.config import CliConfig
from rn_boilerplate.core.models import ModuleSpec
from rn_boilerplate.core.modules import (
    POD_INSTALL_COMMAND,
    build_module_catalog,
    expand_selection,
    is_module_linked,
    npm_install_command,
    npm_uninstall_command,
    strip_version,
)
from rn_boilerplate.core.project_service import ProjectService
from rn_boilerplate.core.protocols import CommandRunner, ProjectStore
from rn_boilerplate.exceptions import CommandFailedError
from rn_boilerplate.infra.manifest_store import JsonManifestStore
from rn_boilerplate.infra.process_runner import SubprocessRunner, format_command


class ModuleManager:
    """Runs the npm steps for enabling and disabling modules.

    Parameters
    ----------
    project_root:
        Resolved project directory.
    runner, store:
        Process and manifest adapters.
    npm_flags:
        Flags appended to every npm install / uninstall.
    confirm:
        Asked before removing a module's extra dependencies.
    """

    def __init__(
        self,
        project_root: Path,
        *,
        runner: CommandRunner,
        store: ProjectStore,
        npm_flags: Sequence[str] = (),
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self.project_root = project_root
        self.catalog: dict[str, ModuleSpec] = build_module_catalog(project_root)
        self._runner = runner
        self._store = store
        self._npm_flags = tuple(npm_flags)
        self._confirm = confirm or _default_confirm

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def is_linked(self, module_name: str) -> bool:
        return is_module_linked(self._store.try_read(self.project_root), module_name)

    def link_status(self) -> dict[str, bool]:
        manifest = self._store.try_read(self.project_root)
        return {name: is_module_linked(manifest, name) for name in self.catalog}

    def show_status(self) -> None:
        log_header("\nModule Status:")
        log_header("==============")
        for name, linked in self.link_status().items():
            status = "[green]LINKED[/green]" if linked else "[red]UNLINKED[/red]"
            console.print(f"[cyan]{name}:[/cyan] {status}")
            dependencies = self.catalog[name].dependencies
            if dependencies:
                log_gray(f"  Dependencies: {', '.join(dependencies)}")
        log_gray("")

    # ------------------------------------------------------------------
    # npm steps
    # ------------------------------------------------------------------

    def _npm(self, command: Sequence[str], context: str) -> None:
        try:
            self._runner.run_interactive(command, cwd=self.project_root)
        except CommandFailedError as exc:
            raise CommandFailedError(
                f"{context}: {exc}",
                command=exc.command,
                returncode=exc.returncode,
            ) from exc

    def link(self, spec: ModuleSpec) -> None:
        log_info(f"Linking module: {spec.name}...")
        self._npm(
            npm_install_command(spec.path, self._npm_flags),
            f"Error linking module {spec.name}",
        )
        log_success(f"Module {spec.name} linked successfully.")

    def unlink(self, spec: ModuleSpec) -> None:
        log_info(f"Unlinking module: {spec.name}...")
        self._npm(
            npm_uninstall_command(spec.name, self._npm_flags),
            f"Error unlinking module {spec.name}",
        )
        log_success(f"Module {spec.name} unlinked successfully.")

    def install_dependencies(self, spec: ModuleSpec) -> None:
        if not spec.dependencies:
            return
        log_info(f"Installing dependencies for {spec.name}...")
        for dependency in spec.dependencies:
            log_gray(f"Installing {dependency}...")
            self._npm(
                npm_install_command(dependency, self._npm_flags),
                f"Error installing dependencies for {spec.name}",
            )
        log_success(f"Dependencies for {spec.name} installed successfully.")
        self.pod_install()

    def uninstall_dependencies(self, spec: ModuleSpec) -> None:
        if not spec.dependencies:
            return
        if not self._confirm(f"Do you want to uninstall dependencies for {spec.name}?"):
            return
        log_info(f"Uninstalling dependencies for {spec.name}...")
        for dependency in spec.dependencies:
            package = strip_version(dependency)
            log_gray(f"Uninstalling {package}...")
            self._npm(
                npm_uninstall_command(package, self._npm_flags),
                f"Error uninstalling dependencies for {spec.name}",
            )
        log_success(f"Dependencies for {spec.name} uninstalled successfully.")
        self.pod_install()

    def pod_install(self) -> None:
        """Run the iOS pod install script; failures only warn."""
        log_info("\nRunning iOS pod install...")
        try:
            self._runner.run_interactive(POD_INSTALL_COMMAND, cwd=self.project_root)
        except CommandFailedError as exc:
            log_warning(f"Error running iOS pod install: {exc}")
            log_gray(f"You may need to run it manually: {format_command(POD_INSTALL_COMMAND)}\n")
            return
        log_success("iOS pod install completed successfully.\n")

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    def enable(self, names: Sequence[str]) -> None:
        spinner = Spinner("Enabling modules...").start()
        try:
            for name in names:
                spec = self.catalog.get(name)
                if spec is None:
                    spinner.fail(f"Unknown module: {name}")
                    continue
                if self.is_linked(name):
                    spinner.info(f"Module {name} is already linked.")
                else:
                    with spinner.paused():
                        self.link(spec)
                with spinner.paused():
                    self.install_dependencies(spec)
        except CommandFailedError as exc:
            spinner.fail(f"Error enabling modules: {exc}")
            raise
        spinner.succeed("Modules enabled successfully!")

    def disable(self, names: Sequence[str]) -> None:
        spinner = Spinner("Disabling modules...").start()
        try:
            for name in names:
                spec = self.catalog.get(name)
                if spec is None:
                    spinner.fail(f"Unknown module: {name}")
                    continue
                if not self.is_linked(name):
                    spinner.info(f"Module {name} is already unlinked.")
                else:
                    with spinner.paused():
                        self.unlink(spec)
                with spinner.paused():
                    self.uninstall_dependencies(spec)
        except CommandFailedError as exc:
            spinner.fail(f"Error disabling modules: {exc}")
            raise
        spinner.succeed("Modules disabled successfully!")


def _default_confirm(message: str) -> bool:
    from rn_boilerplate.cli.prompts import confirm

    return confirm(message, default=False)


def run_interactive_menu(manager: ModuleManager, display_name: str) -> int:
    """Menu shown when ``modules`` is called without flags."""
    from rn_boilerplate.cli.prompts import prompt_action, prompt_modules

    log_header(f"\nModule Setup Tool for \"{display_name}\"")
    log_header("===========================================")
    manager.show_status()

    action = prompt_action()
    if action == "enable":
        selected = prompt_modules(manager.link_status(), enabling=True)
        if selected:
            manager.enable(selected)
    elif action == "disable":
        selected = prompt_modules(manager.link_status(), enabling=False)
        if selected:
            manager.disable(selected)
    elif action == "enable_all":
        manager.enable(list(manager.catalog))
    elif action == "disable_all":
        manager.disable(list(manager.catalog))
    elif action == "status":
        manager.show_status()
    else:
        log_gray("Exiting...")
    return exit_codes.SUCCESS


def run_modules(
    *,
    config: CliConfig,
    status: bool = False,
    enable: str | None = None,
    disable: str | None = None,
    destination: str | None = None,
    runner: CommandRunner | None = None,
    store: ProjectStore | None = None,
) -> int:
    """Dispatch the ``modules`` sub-command."""
    store = store or JsonManifestStore()
    service = ProjectService(store)
    project_root = service.resolve(destination)

    manager = ModuleManager(
        project_root,
        runner=runner or SubprocessRunner(),
        store=store,
        npm_flags=config.npm_flags,
    )

    if status:
        manager.show_status()
    elif enable:
        manager.enable(expand_selection(enable, manager.catalog))
    elif disable:
        manager.disable(expand_selection(disable, manager.catalog))
    else:
        return run_interactive_menu(manager, service.get_identity(project_root).display_name)
    return exit_codes.SUCCESS
