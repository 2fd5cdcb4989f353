"""Process exit codes returned by ``rn-boilerplate``.

Every command handler and the error boundary in :mod:`rn_boilerplate.cli.app`
return one of these values.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command finished; warnings may have been printed."""

GENERAL_ERROR: int = 1
"""An RnBoilerplateError reached the error boundary, or doctor found a missing required tool."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""
