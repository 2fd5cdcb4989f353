"""Rich-based spinner for long-running steps.

Wraps :class:`rich.status.Status` with the terminal states the commands
need (``succeed`` / ``fail`` / ``info``).  When Rich is not installed
the spinner degrades to printing its messages.

Design
------
* The spinner must be stopped before an interactive subprocess takes
  over the terminal; :meth:`Spinner.paused` does that.
* Shutdown-safe: stopping a stopped spinner is a no-op.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from rn_boilerplate.cli.console import get_rich_console, log_error, log_gray, log_info, log_success
from rn_boilerplate.exceptions import EnvironmentError


class Spinner:
    """Spinner with explicit lifecycle.

    Usage::

        spinner = Spinner("Copying template files...").start()
        ...
        spinner.succeed("Template files copied")

    Or as a context manager, which stops (without a final message) on
    exit::

        with Spinner("Working...") as spinner:
            ...
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self._status: Any = None
        try:
            self._status = get_rich_console().status(message, spinner="dots")
        except EnvironmentError:
            self._status = None
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> Spinner:
        return self.start()

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> Spinner:
        """Start the spinner (idempotent)."""
        if not self._started:
            if self._status is not None:
                self._status.start()
            else:
                log_gray(self.message)
            self._started = True
        return self

    def stop(self) -> None:
        """Stop the spinner (idempotent)."""
        if self._started:
            if self._status is not None:
                self._status.stop()
            self._started = False

    @contextmanager
    def paused(self) -> Iterator[None]:
        """Stop while the body runs, then resume if it was running."""
        was_running = self._started
        self.stop()
        try:
            yield
        finally:
            if was_running:
                self.start()

    # ------------------------------------------------------------------
    # Terminal states
    # ------------------------------------------------------------------

    def succeed(self, message: str) -> None:
        self.stop()
        log_success(f"✔ {message}")

    def fail(self, message: str) -> None:
        self.stop()
        log_error(f"✖ {message}")

    def info(self, message: str) -> None:
        """Print *message* above the spinner without stopping it."""
        log_info(f"ℹ {message}")
