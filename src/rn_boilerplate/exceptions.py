"""Custom exception hierarchy for rn-boilerplate.

All exceptions that cross layer boundaries must inherit from
:class:`RnBoilerplateError`.  Raw ``OSError`` / ``json`` /
``subprocess`` exceptions must NEVER propagate beyond the infrastructure
layer — they must be caught and re-raised as a typed subclass defined
here.

Hierarchy
---------
RnBoilerplateError
├── ManifestMissingError
├── NotFrameworkProjectError
├── NotInProjectError
├── ManifestUnreadableError
├── InvalidProjectNameError
├── ProjectExistsError
├── TemplateNotFoundError
├── TemplateCopyError
├── CommandFailedError
├── ToolNotFoundError
├── InvalidColorError
├── IconGenerationError
└── EnvironmentError
    └── OptionalDependencyMissingError
"""

from __future__ import annotations


class RnBoilerplateError(Exception):
    """Base exception for all rn-boilerplate errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Project resolution ----------------------------------------------------

class ManifestMissingError(RnBoilerplateError):
    """Raised when an explicit destination has no ``package.json``."""


class NotFrameworkProjectError(RnBoilerplateError):
    """Raised when a manifest exists but does not depend on react-native."""


class NotInProjectError(RnBoilerplateError):
    """Raised when no ancestor of the working directory is a project."""


class ManifestUnreadableError(RnBoilerplateError):
    """Raised when a JSON manifest is missing or cannot be parsed."""


# --- Project creation ------------------------------------------------------

class InvalidProjectNameError(RnBoilerplateError):
    """Raised when a new project name fails the naming grammar."""


class ProjectExistsError(RnBoilerplateError):
    """Raised when the target directory for ``init`` already exists."""


class TemplateNotFoundError(RnBoilerplateError):
    """Raised when the configured template directory does not exist."""


class TemplateCopyError(RnBoilerplateError):
    """Raised when copying the template into place fails."""


# --- External processes ----------------------------------------------------

class CommandFailedError(RnBoilerplateError):
    """Raised when an external command exits non-zero or cannot start."""

    def __init__(
        self,
        message: str,
        *,
        command: tuple[str, ...] = (),
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.command: tuple[str, ...] = command
        self.returncode: int | None = returncode


class ToolNotFoundError(RnBoilerplateError):
    """Raised when a required executable cannot be located on PATH."""


# --- Assets ----------------------------------------------------------------

class InvalidColorError(RnBoilerplateError):
    """Raised when an icon colour cannot be parsed."""


class IconGenerationError(RnBoilerplateError):
    """Raised when a rendered asset cannot be written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RnBoilerplateError):
    """Raised when a required runtime dependency is not available."""


class OptionalDependencyMissingError(EnvironmentError):
    """Raised when an optional Python dependency needed by a command is absent."""
