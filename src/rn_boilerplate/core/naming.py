"""Project-name validation and normalisation.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

import re

from rn_boilerplate.exceptions import InvalidProjectNameError

_PROJECT_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")

_MANIFEST_SAFE_CHARS: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")


def validate_project_name(name: str) -> bool:
    """Return ``True`` when *name* starts with a letter and contains only
    letters, digits, underscores and hyphens."""
    return _PROJECT_NAME_RE.fullmatch(name) is not None


def require_valid_project_name(name: str) -> str:
    """Return *name* unchanged or raise :class:`InvalidProjectNameError`."""
    if not validate_project_name(name):
        raise InvalidProjectNameError(
            f"Invalid project name: {name!r}",
            hint=(
                "Project name should start with a letter and contain only "
                "letters, numbers, underscores, and hyphens."
            ),
        )
    return name


def to_manifest_safe(name: str) -> str:
    """Derive the ``package.json`` name for a project called *name*.

    Lowercases and replaces every character outside ``[a-z0-9]`` with
    ``-``, one character for one character::

        >>> to_manifest_safe("Project@123!")
        'project-123-'
    """
    # Lowercasing a single character can yield several (e.g. "İ"), so
    # the substitution is decided per source character.
    return "".join(
        lowered if lowered in _MANIFEST_SAFE_CHARS else "-"
        for lowered in (char.lower() for char in name)
    )
