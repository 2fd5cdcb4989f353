"""Optional feature-module catalog and npm command construction.

Pure helpers only: the CLI layer runs the commands built here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from rn_boilerplate.core.manifest import has_dependency
from rn_boilerplate.core.models import ModuleSpec

MODULES_DIRNAME: str = "modules"

ALL_MODULES: str = "all"

POD_INSTALL_COMMAND: tuple[str, ...] = ("npm", "run", "ios:pod-install")


def build_module_catalog(project_root: Path) -> dict[str, ModuleSpec]:
    """Return the modules shipped with the template, keyed by package name."""
    modules_dir = project_root / MODULES_DIRNAME
    specs = (
        ModuleSpec(
            name="md-chat-ai-screen",
            path=modules_dir / "chat-ai-screen",
            dependencies=("react-native-executorch@0.4.6",),
        ),
        ModuleSpec(
            name="md-redux-screen",
            path=modules_dir / "redux-screen",
        ),
        ModuleSpec(
            name="md-skia-accelerometer-screen",
            path=modules_dir / "skia-accelerometer-screen",
        ),
    )
    return {spec.name: spec for spec in specs}


def is_module_linked(manifest: Mapping[str, Any] | None, module_name: str) -> bool:
    """A module is linked iff it is a runtime dependency of the project."""
    if manifest is None:
        return False
    return has_dependency(manifest, module_name, fields=("dependencies",))


def expand_selection(selection: str, catalog: Mapping[str, ModuleSpec]) -> list[str]:
    """Turn a ``--enable`` / ``--disable`` argument into module names.

    ``"all"`` expands to every catalog entry; anything else is returned
    as a single-item list, unknown names included, so the caller can
    report them.
    """
    if selection == ALL_MODULES:
        return list(catalog)
    return [selection]


def strip_version(dependency: str) -> str:
    """Drop the version specifier from an npm dependency string.

    Scoped packages keep their leading ``@``::

        >>> strip_version("@scope/pkg@1.2.3")
        '@scope/pkg'
    """
    if dependency.startswith("@"):
        scope_and_name, _, _ = dependency[1:].partition("@")
        return "@" + scope_and_name
    return dependency.partition("@")[0]


def npm_install_command(
    package: str | Path,
    npm_flags: Sequence[str] = (),
) -> tuple[str, ...]:
    return ("npm", "install", str(package), "--save", *npm_flags)


def npm_uninstall_command(
    package: str,
    npm_flags: Sequence[str] = (),
) -> tuple[str, ...]:
    return ("npm", "uninstall", package, "--save", *npm_flags)
