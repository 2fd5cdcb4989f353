"""Interactive prompts for the ``modules`` command.

This module is responsible for:

* Asking which action to take when ``modules`` runs without flags.
* Letting the user tick modules in a checkbox list.
* Confirming dependency removal.

No npm calls and no manifest reads happen here — callers pass in
everything that is displayed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rn_boilerplate.exceptions import OptionalDependencyMissingError

ACTIONS: tuple[tuple[str, str], ...] = (
    ("Enable specific module(s)", "enable"),
    ("Disable specific module(s)", "disable"),
    ("Enable all modules", "enable_all"),
    ("Disable all modules", "disable_all"),
    ("Show status", "status"),
    ("Exit", "exit"),
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise OptionalDependencyMissingError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def build_module_choice_label(name: str, linked: bool, *, enabling: bool) -> str:
    """``"md-redux-screen (already linked)"`` style label."""
    if enabling and linked:
        return f"{name} (already linked)"
    if not enabling and not linked:
        return f"{name} (already unlinked)"
    return name


def prompt_action() -> str:
    """Ask what to do; Esc / Ctrl+C maps to ``"exit"``."""
    questionary = _import_questionary()
    choices = [questionary.Choice(title=title, value=value) for title, value in ACTIONS]
    selected: str | None = questionary.select(
        "What would you like to do?",
        choices=choices,
    ).ask()
    return selected or "exit"


def prompt_modules(link_status: Mapping[str, bool], *, enabling: bool) -> list[str]:
    """Return the module names the user ticked (may be empty)."""
    questionary = _import_questionary()
    verb = "enable" if enabling else "disable"
    choices = [
        questionary.Choice(
            title=build_module_choice_label(name, linked, enabling=enabling),
            value=name,
        )
        for name, linked in link_status.items()
    ]
    selected: list[str] | None = questionary.checkbox(
        f"Select modules to {verb}:",
        choices=choices,
    ).ask()
    return list(selected or [])


def confirm(message: str, *, default: bool = False) -> bool:
    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(message, default=default).ask()
    return bool(answer)
