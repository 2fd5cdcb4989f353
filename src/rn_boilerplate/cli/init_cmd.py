"""``rn-boilerplate init`` — create a new project from the template.

Flow:
1. Validate the name (before touching the filesystem).
2. Refuse an existing target directory; locate the template.
3. Copy the template, rename the native app, set the manifest name.
4. Install npm dependencies unless ``--skip-install``.
"""

from __future__ import annotations

from pathlib import Path

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.console import log_gray, log_header, log_plain, log_success, log_warning
from rn_boilerplate.cli.spinner import Spinner
from rn_boilerplate.config import CliConfig
from rn_boilerplate.core.naming import require_valid_project_name, to_manifest_safe
from rn_boilerplate.core.project_service import ProjectService
from rn_boilerplate.core.protocols import CommandRunner, ProjectStore
from rn_boilerplate.exceptions import CommandFailedError, ProjectExistsError
from rn_boilerplate.infra.manifest_store import JsonManifestStore
from rn_boilerplate.infra.process_runner import SubprocessRunner, format_command
from rn_boilerplate.infra.template import copy_template, locate_template


def rename_commands(name: str) -> list[tuple[str, ...]]:
    """``react-native-rename`` invocations to try, in order."""
    base = ("npx", "react-native-rename", name, "--skipGitStatusCheck")
    return [(*base, "--bundleID", f"com.{name.lower()}"), base]


def rename_app(runner: CommandRunner, project_path: Path, name: str) -> None:
    """Rename native identifiers, retrying without a bundle ID.

    Raises
    ------
    CommandFailedError
        When every attempt fails (the last failure is raised).
    """
    attempts = rename_commands(name)
    for command in attempts[:-1]:
        try:
            runner.run_interactive(command, cwd=project_path)
            return
        except CommandFailedError:
            continue
    runner.run_interactive(attempts[-1], cwd=project_path)


def set_manifest_name(store: ProjectStore, project_path: Path, name: str) -> bool:
    """Write the manifest-safe *name* into ``package.json`` if present."""
    if not store.exists(project_path):
        return False
    manifest = store.read(project_path)
    manifest["name"] = to_manifest_safe(name)
    store.write(project_path, manifest)
    return True


def _print_next_steps(name: str, project_path: Path, *, skip_install: bool) -> None:
    log_success(f"\nProject \"{name}\" created successfully!")
    log_gray(f"Location: {project_path}")
    log_header("\nNext steps:")
    log_plain(f"  cd {name}")
    if skip_install:
        log_plain("  npm install")
    log_plain("  npm run ios     # Run on iOS")
    log_plain("  npm run android # Run on Android")
    log_gray("\nTo manage modules, use: rn-boilerplate modules --help")


def run_init(
    name: str,
    *,
    config: CliConfig,
    destination: str | None = None,
    skip_install: bool = False,
    template: str | None = None,
    runner: CommandRunner | None = None,
    store: ProjectStore | None = None,
) -> int:
    """Create project *name* under *destination* (default: cwd).

    Raises
    ------
    InvalidProjectNameError
        *name* fails the naming grammar.
    ProjectExistsError
        The target directory already exists.
    TemplateNotFoundError
        The template directory is missing.
    TemplateCopyError
        Copying failed; the partial directory is left for inspection.
    """
    runner = runner or SubprocessRunner()
    store = store or JsonManifestStore()

    require_valid_project_name(name)

    parent = Path(destination).expanduser() if destination else Path.cwd()
    project_path = parent.resolve() / name
    if project_path.exists():
        raise ProjectExistsError(f"Project directory already exists: {project_path}")

    template_path = locate_template(config, template)

    log_header(f"Creating project \"{name}\" at {project_path}")
    log_gray(f"Template source: {template_path}")

    spinner = Spinner("Copying template files...").start()
    try:
        copy_template(template_path, project_path)
    except Exception:
        spinner.fail("Failed to copy template files")
        raise
    spinner.succeed("Template files copied successfully")

    current_name = ProjectService(store).get_name(project_path)
    if current_name != name:
        try:
            rename_app(runner, project_path, name)
            log_success(f"Renamed app from \"{current_name}\" to \"{name}\"")
        except CommandFailedError as exc:
            log_warning(f"App rename failed: {exc}")
            log_gray(
                "You can rename it later with: "
                + format_command(rename_commands(name)[-1])
            )

    set_manifest_name(store, project_path, name)

    if not skip_install:
        spinner = Spinner("Installing dependencies...").start()
        try:
            with spinner.paused():
                runner.run_interactive(
                    ("npm", "install", *config.npm_flags),
                    cwd=project_path,
                )
        except CommandFailedError:
            spinner.fail("Dependency installation failed")
            log_gray("Run 'npm install' in the project directory to retry.")
        else:
            spinner.succeed("Dependencies installed")

    _print_next_steps(name, project_path, skip_install=skip_install)
    return exit_codes.SUCCESS
