"""``rn-boilerplate doctor`` — environment diagnostics command.

Gathers tool availability and renders a Rich table summarising whether
the machine can run every rn-boilerplate command.  Missing optional
tools are warnings; missing node / npm / npx is a failure.
"""

from __future__ import annotations

import platform
import sys

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.console import console
from rn_boilerplate.core.project_service import ProjectService
from rn_boilerplate.infra.icon_renderer import pillow_available
from rn_boilerplate.infra.manifest_store import JsonManifestStore
from rn_boilerplate.infra.tool_detector import detect_tool
from rn_boilerplate.version import __version__

REQUIRED_TOOLS: tuple[str, ...] = ("node", "npm", "npx")
OPTIONAL_TOOLS: tuple[str, ...] = ("watchman", "adb", "xcrun")

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    return "Python", version, OK if ok else "[red]FAIL (>=3.10 required)[/red]"


def _tool_check(name: str, *, required: bool) -> tuple[str, str, str]:
    status = detect_tool(name)
    if status.found:
        return name, str(status.path), OK
    return name, "not found", FAIL if required else WARN


def _pillow_check() -> tuple[str, str, str]:
    if pillow_available():
        return "Pillow", "installed", OK
    return "Pillow", "not installed (icons disabled)", WARN


def _project_check() -> tuple[str, str, str]:
    root = ProjectService(JsonManifestStore()).find_root()
    if root is None:
        return "Project", "not inside a React Native project", WARN
    return "Project", str(root), OK


def _version_check() -> tuple[str, str, str]:
    return "rn-boilerplate", __version__, OK


def collect_checks() -> list[tuple[str, str, str]]:
    checks = [_version_check(), _python_version_check()]
    checks.extend(_tool_check(name, required=True) for name in REQUIRED_TOOLS)
    checks.extend(_tool_check(name, required=False) for name in OPTIONAL_TOOLS)
    checks.append(_pillow_check())
    checks.append(_project_check())
    return checks


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nrn-boilerplate doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<16} {'Value':<44} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<16} {value:<44} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check failed,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print(
            "Some checks failed." if has_failure else "All required checks passed.",
            file=sys.stderr,
        )
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="rn-boilerplate doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All required checks passed.[/bold green]")
    return exit_codes.SUCCESS
