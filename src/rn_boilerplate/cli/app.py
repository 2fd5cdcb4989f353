"""CLI application entry point and command routing for rn-boilerplate.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rn_boilerplate.exceptions.RnBoilerplateError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the command
  modules, which go through the core and infrastructure layers.
* Command modules are imported lazily so ``--help`` and ``--version``
  never import Rich, questionary or Pillow.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from rn_boilerplate.cli import exit_codes
from rn_boilerplate.cli.console import console, escape_markup
from rn_boilerplate.config import CliConfig, load_config
from rn_boilerplate.exceptions import RnBoilerplateError
from rn_boilerplate.version import __version__

PROG = "rn-boilerplate"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_destination(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--destination", metavar="PATH", default=None, help="Project directory path")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-parser per command."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Create React Native projects from the template and manage their modules.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    init = sub.add_parser("init", help="Initialize a new React Native project from the template")
    init.add_argument("project_name", metavar="project-name", help="Name of the project to create")
    init.add_argument(
        "-d",
        "--destination",
        metavar="PATH",
        default=None,
        help="Destination directory (default: current directory)",
    )
    init.add_argument("--skip-install", action="store_true", help="Skip npm install")
    init.add_argument(
        "-t",
        "--template",
        metavar="NAME",
        default=None,
        help="Template variant to use (default: main)",
    )

    modules = sub.add_parser("modules", help="Manage project modules (enable/disable/status)")
    modules_mode = modules.add_mutually_exclusive_group()
    modules_mode.add_argument("-s", "--status", action="store_true", help="Show module status")
    modules_mode.add_argument("-e", "--enable", metavar="MODULE", help='Enable a specific module or "all"')
    modules_mode.add_argument("-d", "--disable", metavar="MODULE", help='Disable a specific module or "all"')
    _add_destination(modules)

    icons = sub.add_parser("icons", help="Generate app icons and splash screens")
    icons_mode = icons.add_mutually_exclusive_group()
    icons_mode.add_argument("--android", action="store_true", help="Generate Android icons only")
    icons_mode.add_argument("--ios", action="store_true", help="Generate iOS icons only")
    icons_mode.add_argument("--splash", action="store_true", help="Generate splash screens only")
    icons.add_argument("--primary", metavar="COLOR", default=None, help="Primary color (default: #1976D2)")
    icons.add_argument("--background", metavar="COLOR", default=None, help="Background color (default: #FFFFFF)")
    _add_destination(icons)

    refresh = sub.add_parser("refresh", help="Refresh React Native project (watchman, modules, cache)")
    refresh_mode = refresh.add_mutually_exclusive_group()
    refresh_mode.add_argument("-w", "--watchman", action="store_true", help="Clear watchman watches only")
    refresh_mode.add_argument("-m", "--modules", action="store_true", help="Clean and reinstall node modules only")
    refresh_mode.add_argument("-s", "--start", action="store_true", help="Start with cache reset only")
    _add_destination(refresh)

    devices = sub.add_parser("devices", help="List connected Android and iOS devices")
    devices.add_argument("-d", "--details", action="store_true", help="Show detailed device information")
    devices_mode = devices.add_mutually_exclusive_group()
    devices_mode.add_argument("-a", "--android", action="store_true", help="Show Android devices only")
    devices_mode.add_argument("-i", "--ios", action="store_true", help="Show iOS devices only")

    sub.add_parser("doctor", help="Check that the required tools are installed")

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_init(args: argparse.Namespace, config: CliConfig) -> int:
    from rn_boilerplate.cli.init_cmd import run_init

    return run_init(
        args.project_name,
        config=config,
        destination=args.destination,
        skip_install=args.skip_install,
        template=args.template,
    )


def _handle_modules(args: argparse.Namespace, config: CliConfig) -> int:
    from rn_boilerplate.cli.modules_cmd import run_modules

    return run_modules(
        config=config,
        status=args.status,
        enable=args.enable,
        disable=args.disable,
        destination=args.destination,
    )


def _handle_icons(args: argparse.Namespace, config: CliConfig) -> int:
    from rn_boilerplate.cli.icons_cmd import run_icons

    return run_icons(
        android=args.android,
        ios=args.ios,
        splash=args.splash,
        primary=args.primary,
        background=args.background,
        destination=args.destination,
    )


def _handle_refresh(args: argparse.Namespace, config: CliConfig) -> int:
    from rn_boilerplate.cli.refresh_cmd import run_refresh

    return run_refresh(
        watchman=args.watchman,
        modules=args.modules,
        start=args.start,
        destination=args.destination,
    )


def _handle_devices(args: argparse.Namespace, config: CliConfig) -> int:
    from rn_boilerplate.cli.devices_cmd import run_devices

    return run_devices(details=args.details, android=args.android, ios=args.ios)


def _handle_doctor(args: argparse.Namespace, config: CliConfig) -> int:
    from rn_boilerplate.cli.doctor import run_doctor

    return run_doctor()


_HANDLERS = {
    "init": _handle_init,
    "modules": _handle_modules,
    "icons": _handle_icons,
    "refresh": _handle_refresh,
    "devices": _handle_devices,
    "doctor": _handle_doctor,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, config: CliConfig | None = None) -> int:
    """Run the rn-boilerplate CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    config:
        Installation settings; built from the environment when omitted.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    handler = _HANDLERS[args.command]
    return handler(args, config or load_config())


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except RnBoilerplateError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
