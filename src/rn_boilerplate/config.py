"""Runtime configuration for rn-boilerplate.

The CLI builds one :class:`CliConfig` at startup and passes it to the
code that needs installation-relative paths.  Nothing else derives
paths from module locations.

Environment variables
---------------------
``RN_BOILERPLATE_HOME``
    Base installation directory containing ``templates/``.
``RN_BOILERPLATE_TEMPLATE``
    Default template directory name under ``templates/``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

HOME_ENV_VAR: str = "RN_BOILERPLATE_HOME"
TEMPLATE_ENV_VAR: str = "RN_BOILERPLATE_TEMPLATE"

DEFAULT_TEMPLATE_NAME: str = "react-native-template-v1.0.0"
DEFAULT_NPM_FLAGS: tuple[str, ...] = ("--legacy-peer-deps",)


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Installation-level settings injected into command handlers."""

    base_dir: Path
    """Directory that holds the ``templates/`` folder."""

    template_name: str = DEFAULT_TEMPLATE_NAME
    """Template used by ``init`` when ``--template`` is not given."""

    npm_flags: tuple[str, ...] = DEFAULT_NPM_FLAGS
    """Extra flags appended to every ``npm install`` / ``npm uninstall``."""

    @property
    def templates_dir(self) -> Path:
        return self.base_dir / "templates"

    def template_path(self, template: str | None = None) -> Path:
        """Return the directory for *template*, or the default template.

        ``"main"`` is an alias for the default template.
        """
        name = template if template and template != "main" else self.template_name
        return self.templates_dir / name


def _package_dir() -> Path:
    return Path(__file__).resolve().parent


def load_config(environ: Mapping[str, str] | None = None) -> CliConfig:
    """Build a :class:`CliConfig` from *environ* (default ``os.environ``)."""
    env = os.environ if environ is None else environ

    raw_home = env.get(HOME_ENV_VAR, "").strip()
    base_dir = Path(raw_home).expanduser().resolve() if raw_home else _package_dir()

    template_name = env.get(TEMPLATE_ENV_VAR, "").strip() or DEFAULT_TEMPLATE_NAME

    return CliConfig(base_dir=base_dir, template_name=template_name)
