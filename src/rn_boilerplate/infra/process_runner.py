"""Subprocess-backed implementation of :class:`~rn_boilerplate.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns external
programs.  Commands are passed as argument lists (never through a
shell) and run to completion with no timeout.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from rn_boilerplate.exceptions import CommandFailedError


def format_command(args: Sequence[str]) -> str:
    """Render *args* as a copy-pasteable shell command."""
    return shlex.join(args)


class SubprocessRunner:
    """Concrete :class:`CommandRunner` backed by :mod:`subprocess`.

    This class satisfies the :class:`~rn_boilerplate.core.protocols.CommandRunner`
    protocol structurally — no explicit inheritance required.
    """

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> str:
        """Run *args* with captured output and return stdout.

        Raises
        ------
        CommandFailedError
            When the program is missing or exits non-zero.  The message
            includes stderr.
        """
        command = tuple(args)
        try:
            proc = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise CommandFailedError(
                f"Command failed: {format_command(command)}\n{exc}",
                command=command,
            ) from exc

        if proc.returncode != 0:
            detail = (proc.stderr or proc.stdout).strip()
            raise CommandFailedError(
                f"Command failed: {format_command(command)}\n{detail}".rstrip(),
                command=command,
                returncode=proc.returncode,
            )
        return proc.stdout

    def run_interactive(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        """Run *args* with the terminal attached.

        Raises
        ------
        CommandFailedError
            When the program is missing or exits non-zero.
        """
        command = tuple(args)
        try:
            proc = subprocess.run(command, cwd=cwd, check=False)
        except OSError as exc:
            raise CommandFailedError(
                f"Command failed: {format_command(command)}\n{exc}",
                command=command,
            ) from exc

        if proc.returncode != 0:
            raise CommandFailedError(
                f"Command failed: {format_command(command)} (exit code {proc.returncode})",
                command=command,
                returncode=proc.returncode,
            )

    @staticmethod
    def is_available(program: str) -> bool:
        return shutil.which(program) is not None
