"""Domain models for cargo-preset.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and construction-time validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from cargo_preset.exceptions import InvalidCommandError


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ApplyCommand:
    """Copy a preset's contents into the working directory."""

    name: str


@dataclass(frozen=True, slots=True)
class ListCommand:
    """Enumerate available presets."""


@dataclass(frozen=True, slots=True)
class AddCommand:
    """Create a new preset from files and directories.

    At least one of :attr:`files` or :attr:`directories` must be
    non-empty.
    """

    name: str
    files: tuple[Path, ...] = ()
    directories: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        if not self.files and not self.directories:
            raise InvalidCommandError(
                "add requires at least one of --files or --directories",
            )


@dataclass(frozen=True, slots=True)
class RemoveCommand:
    """Delete a preset and everything in it."""

    name: str


@dataclass(frozen=True, slots=True)
class InspectCommand:
    """Show the directory tree of a preset."""

    name: str


Command = Union[ApplyCommand, ListCommand, AddCommand, RemoveCommand, InspectCommand]


@dataclass(frozen=True, slots=True)
class Invocation:
    """A parsed command line: the command plus global flags."""

    command: Command
    debug: bool = False


# ---------------------------------------------------------------------------
# Filesystem views
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TreeEntry:
    """One filesystem entry met during a depth-first traversal."""

    path: Path
    """Absolute (or root-relative, as given) path of the entry."""

    relative: Path
    """Path of the entry relative to the traversal root."""

    depth: int
    """Nesting depth; immediate children of the root have the start depth."""

    is_dir: bool
    """Whether the entry is (or links to) a directory."""

    cycle: bool = False
    """``True`` when the directory loops back to an ancestor and was not entered."""

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True, slots=True)
class CopiedFile:
    """Record of a single file copied into a preset."""

    source: Path
    destination: Path
    size: int
    """Bytes written to :attr:`destination`."""
