"""CLI application entry point and command routing for cargo-preset.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cargo_preset.exceptions.CargoPresetError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~cargo_preset.core.preset_service.PresetService`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from cargo_preset.cli import exit_codes
from cargo_preset.cli.console import console, escape
from cargo_preset.cli.logging_setup import configure_logging
from cargo_preset.cli.parser import build_parser, parse_invocation
from cargo_preset.core.models import (
    AddCommand,
    ApplyCommand,
    Command,
    InspectCommand,
    ListCommand,
    RemoveCommand,
)
from cargo_preset.core.preset_service import PresetService
from cargo_preset.exceptions import CargoPresetError, InvalidCommandError, PresetIOError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _working_directory() -> Path:
    """Return the invocation directory, mapping OS failures to ``PresetIOError``."""
    try:
        return Path.cwd()
    except OSError as exc:
        raise PresetIOError(
            f"Could not determine the current directory: {exc}",
            hint="The directory may have been deleted; cd into an existing one.",
        ) from exc


def _handle_apply(service: PresetService, command: ApplyCommand) -> int:
    service.apply(command.name, _working_directory())
    return exit_codes.SUCCESS


def _handle_list(service: PresetService, _command: ListCommand) -> int:
    names = service.list_presets()
    console.out("Available presets:")
    for name in names:
        console.out(f"\t{name}")
    return exit_codes.SUCCESS


def _handle_add(service: PresetService, command: AddCommand) -> int:
    service.add(command.name, command.files, command.directories)
    return exit_codes.SUCCESS


def _handle_remove(service: PresetService, command: RemoveCommand) -> int:
    service.remove(command.name)
    return exit_codes.SUCCESS


def _handle_inspect(service: PresetService, command: InspectCommand) -> int:
    lines = service.inspect(command.name)
    console.out(f"Contents of {command.name}:")
    for line in lines:
        console.out(line)
    return exit_codes.SUCCESS


def dispatch(service: PresetService, command: Command) -> int:
    """Route *command* to its handler and return the exit code."""
    if isinstance(command, ApplyCommand):
        return _handle_apply(service, command)
    if isinstance(command, ListCommand):
        return _handle_list(service, command)
    if isinstance(command, AddCommand):
        return _handle_add(service, command)
    if isinstance(command, RemoveCommand):
        return _handle_remove(service, command)
    if isinstance(command, InspectCommand):
        return _handle_inspect(service, command)
    raise InvalidCommandError(f"Unsupported command: {command!r}")


def _build_service() -> PresetService:
    """Locate the store and wire the filesystem backend into the service."""
    from cargo_preset.infra.local_store import LocalPresetStore
    from cargo_preset.infra.store_locator import locate_store

    return PresetService(LocalPresetStore(locate_store()))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the cargo-preset CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = build_parser()
    invocation = parse_invocation(argv, parser)

    if invocation is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(invocation.debug)
    logger.debug("Parsed %r", invocation)

    service = _build_service()
    return dispatch(service, invocation.command)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CargoPresetError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
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
