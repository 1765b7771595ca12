"""Command-line parsing: ``argv`` → :class:`~cargo_preset.core.models.Invocation`.

Usage::

    cargo-preset [-d] <COMMAND>

    apply    <name>
    list
    add      <name> (--files <path>... | --directories <path>...)
    remove   <name>
    inspect  <name>

Parse errors go through :meth:`argparse.ArgumentParser.error`, which
prints usage and exits with status 2 before any filesystem access.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from cargo_preset.core.models import (
    AddCommand,
    ApplyCommand,
    Command,
    InspectCommand,
    Invocation,
    ListCommand,
    RemoveCommand,
)
from cargo_preset.exceptions import InvalidCommandError
from cargo_preset.version import __version__

PROG: str = "cargo-preset"


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with its five subcommands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Save collections of files as named presets and copy them into new projects.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Print extra diagnostic output.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<COMMAND>")

    apply_parser = subparsers.add_parser("apply", help="Use preset")
    apply_parser.add_argument("name", help="Preset to copy into the current directory")

    subparsers.add_parser("list", help="List available presets")

    add_parser = subparsers.add_parser("add", help="Add preset")
    add_parser.add_argument("name", help="Name of new preset")
    add_parser.add_argument(
        "--files",
        nargs="+",
        type=Path,
        default=[],
        metavar="PATH",
        help="Files to have with preset",
    )
    add_parser.add_argument(
        "--directories",
        nargs="+",
        type=Path,
        default=[],
        metavar="PATH",
        help="Directories to have with preset",
    )

    remove_parser = subparsers.add_parser("remove", help="Remove preset")
    remove_parser.add_argument("name", help="Preset to delete")

    inspect_parser = subparsers.add_parser("inspect", help="View details of preset")
    inspect_parser.add_argument("name", help="Preset to show")

    return parser


def _to_command(args: argparse.Namespace) -> Command:
    """Map a parsed namespace onto a typed command value."""
    if args.command == "apply":
        return ApplyCommand(name=args.name)
    if args.command == "list":
        return ListCommand()
    if args.command == "add":
        return AddCommand(
            name=args.name,
            files=tuple(args.files),
            directories=tuple(args.directories),
        )
    if args.command == "remove":
        return RemoveCommand(name=args.name)
    if args.command == "inspect":
        return InspectCommand(name=args.name)
    raise InvalidCommandError(f"Unknown command: {args.command}")


def parse_invocation(
    argv: Sequence[str] | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Invocation | None:
    """Parse *argv* into an :class:`Invocation`.

    Returns ``None`` when no subcommand was given.  Exits via
    :class:`SystemExit` on invalid input, ``--help`` or ``--version``.
    """
    parser = parser or build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        return None
    try:
        command = _to_command(args)
    except InvalidCommandError as exc:
        parser.error(str(exc))
    return Invocation(command=command, debug=args.debug)
