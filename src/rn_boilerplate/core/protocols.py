"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol


class ProjectStore(Protocol):
    """Contract for reading project files from disk.

    Any object that implements these methods satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def exists(self, path: Path) -> bool:
        """Return ``True`` iff ``path/package.json`` is present."""
        ...  # pragma: no cover

    def read(self, path: Path) -> dict[str, Any]:
        """Parse ``path/package.json``.

        Raises
        ------
        ManifestUnreadableError
            When the file is missing, malformed, or not a JSON object.
        """
        ...  # pragma: no cover

    def write(self, path: Path, manifest: dict[str, Any]) -> None:
        """Overwrite ``path/package.json`` with *manifest*."""
        ...  # pragma: no cover

    def try_read(self, path: Path) -> dict[str, Any] | None:
        """Like :meth:`read`, but return ``None`` instead of raising."""
        ...  # pragma: no cover

    def try_read_app_descriptor(self, path: Path) -> dict[str, Any] | None:
        """Return the parsed ``path/app.json``, or ``None`` if unreadable."""
        ...  # pragma: no cover

    def list_directories(self, path: Path) -> list[str]:
        """Return names of sub-directories of *path*, sorted.

        A missing *path* yields an empty list.  Entries that cannot be
        stat'ed are treated as non-directories.
        """
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for running external programs.

    Implementations must map every OS-level failure to
    :class:`~rn_boilerplate.exceptions.CommandFailedError`.
    """

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> str:
        """Run *args* capturing output and return stdout.

        Raises
        ------
        CommandFailedError
            When the program cannot be started or exits non-zero.
        """
        ...  # pragma: no cover

    def run_interactive(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        """Run *args* with the terminal attached (inherited stdio).

        Raises
        ------
        CommandFailedError
            When the program cannot be started or exits non-zero.
        """
        ...  # pragma: no cover

    def is_available(self, program: str) -> bool:
        """Return ``True`` when *program* is found on PATH."""
        ...  # pragma: no cover
