"""Infrastructure: project template location and copying.

The template directory comes from the injected
:class:`~rn_boilerplate.config.CliConfig`; this module never looks at
its own install location.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from rn_boilerplate.config import HOME_ENV_VAR, CliConfig
from rn_boilerplate.exceptions import CommandFailedError, TemplateCopyError, TemplateNotFoundError

# Never copied out of a template checkout.
TEMPLATE_EXCLUDES: tuple[str, ...] = (
    "node_modules",
    ".git",
    "Pods",
    "build",
    "DerivedData",
    ".DS_Store",
)


def locate_template(config: CliConfig, template: str | None = None) -> Path:
    """Return the template directory or raise :class:`TemplateNotFoundError`."""
    path = config.template_path(template)
    if not path.is_dir():
        raise TemplateNotFoundError(
            f"Template directory not found: {path}",
            hint=(
                f"Set {HOME_ENV_VAR} to a directory containing "
                f"templates/{path.name}."
            ),
        )
    return path


def copy_template(source: Path, destination: Path) -> None:
    """Recursively copy *source* into *destination* (which must not exist).

    Raises
    ------
    TemplateCopyError
        For any filesystem error during the copy.
    """
    try:
        shutil.copytree(
            source,
            destination,
            ignore=shutil.ignore_patterns(*TEMPLATE_EXCLUDES),
            symlinks=True,
        )
    except (OSError, shutil.Error) as exc:
        raise TemplateCopyError(
            f"Failed to copy template to {destination}: {exc}",
        ) from exc


def remove_directory(path: Path) -> None:
    """Delete *path* recursively; a missing directory is not an error.

    Raises
    ------
    CommandFailedError
        When the directory exists but cannot be removed.
    """
    if not path.exists():
        return
    try:
        shutil.rmtree(path)
    except OSError as exc:
        raise CommandFailedError(f"Failed to remove {path}: {exc}") from exc
