"""Protocols (interfaces) consumed by the core layer.

The core depends only on :class:`PresetStore`; the filesystem-backed
implementation lives in :mod:`cargo_preset.infra.local_store`.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from cargo_preset.core.models import CopiedFile, TreeEntry


class PresetStore(Protocol):
    """Contract for preset storage backends.

    Implementations may raise :class:`OSError` from any method; the
    service layer maps those to
    :class:`~cargo_preset.exceptions.PresetIOError`.
    """

    def names(self) -> list[str]:
        """Return the names of all stored presets."""
        ...  # pragma: no cover

    def create(self, name: str) -> None:
        """Create an empty preset called *name*.

        Raises :class:`FileExistsError` if it is already present.
        """
        ...  # pragma: no cover

    def entry_name(self, source: Path) -> str:
        """Return the name *source* will have at the top of a preset."""
        ...  # pragma: no cover

    def add_file(self, name: str, source: Path) -> CopiedFile:
        """Copy the single file *source* into preset *name*."""
        ...  # pragma: no cover

    def add_directory(self, name: str, source: Path) -> None:
        """Recursively copy directory *source* (itself, not only its contents) into preset *name*."""
        ...  # pragma: no cover

    def materialize(self, name: str, destination: Path) -> None:
        """Copy the contents of preset *name* into *destination*, overwriting."""
        ...  # pragma: no cover

    def delete(self, name: str) -> None:
        """Recursively delete preset *name*."""
        ...  # pragma: no cover

    def walk(self, name: str) -> Iterator[TreeEntry]:
        """Lazily yield every entry of preset *name* depth-first."""
        ...  # pragma: no cover
