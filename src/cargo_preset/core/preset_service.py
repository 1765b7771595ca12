"""Core preset service — the five preset operations.

The service depends on a :class:`~cargo_preset.core.protocols.PresetStore`
injected at construction time and is responsible for:

* Validating preset existence against the registry.
* Delegating reads, copies and deletes to the store.
* Ensuring only :class:`~cargo_preset.exceptions.CargoPresetError`
  subclasses escape.

Guarantees
----------
* No ``print()`` — diagnostics go through :mod:`logging`.
* No direct filesystem access.
* No rollback: a failure part-way through a copy leaves whatever was
  already copied in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from cargo_preset.core.models import CopiedFile
from cargo_preset.core.protocols import PresetStore
from cargo_preset.core.tree_format import render_tree
from cargo_preset.exceptions import (
    InvalidCommandError,
    PresetExistsError,
    PresetIOError,
    PresetNotFoundError,
)

logger = logging.getLogger(__name__)


@contextmanager
def _io_boundary(action: str) -> Iterator[None]:
    """Re-raise :class:`OSError` as :class:`PresetIOError`."""
    try:
        yield
    except OSError as exc:
        raise PresetIOError(f"{action}: {exc}") from exc


class PresetService:
    """Stateless service implementing apply, list, add, remove and inspect.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`PresetStore` protocol.
    """

    def __init__(self, store: PresetStore) -> None:
        self._store: PresetStore = store

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def list_presets(self) -> list[str]:
        """Return the names of all stored presets.

        Raises
        ------
        PresetIOError
            If the store cannot be read.
        """
        with _io_boundary("Could not read preset store"):
            return self._store.names()

    def _require(self, name: str) -> None:
        if name not in self.list_presets():
            raise PresetNotFoundError(
                f"Could not find preset with name {name}",
                hint="Run 'cargo-preset list' to see available presets.",
            )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def apply(self, name: str, destination: Path) -> None:
        """Copy the contents of preset *name* into *destination*.

        Existing files in *destination* with the same relative path are
        overwritten.

        Raises
        ------
        PresetNotFoundError
            If *name* is not in the store.
        PresetIOError
            If reading the preset or writing any file fails.
        """
        self._require(name)
        logger.debug("Applying preset %s into %s", name, destination)
        with _io_boundary(f"Could not apply preset {name}"):
            self._store.materialize(name, destination)

    def add(
        self,
        name: str,
        files: Sequence[Path] = (),
        directories: Sequence[Path] = (),
    ) -> list[CopiedFile]:
        """Create preset *name* from *files* and *directories*.

        Each file lands at the top of the preset under its base name;
        each directory is copied recursively under its own name.

        Returns
        -------
        list[CopiedFile]
            One record per file given in *files*.

        Raises
        ------
        PresetExistsError
            If *name* is already taken.
        PresetIOError
            If creating the preset or copying any source fails.
        """
        if name in self.list_presets():
            raise PresetExistsError(
                f"Preset with name {name} already exists",
                hint=f"Remove it first with 'cargo-preset remove {name}'.",
            )
        self._reject_name_clashes([*files, *directories])

        with _io_boundary(f"Could not create preset {name}"):
            self._store.create(name)

        copied: list[CopiedFile] = []
        for source in files:
            with _io_boundary(f"Could not copy file {source}"):
                record = self._store.add_file(name, source)
            logger.debug("file: %s, preset: %s", record.source, record.destination)
            logger.debug("wrote %d bytes", record.size)
            copied.append(record)

        for source in directories:
            logger.debug("directory: %s, preset: %s", source, name)
            with _io_boundary(f"Could not copy directory {source}"):
                self._store.add_directory(name, source)

        return copied

    def _reject_name_clashes(self, sources: Sequence[Path]) -> None:
        """Fail before anything is created if two sources share a top-level name."""
        seen: dict[str, Path] = {}
        for source in sources:
            with _io_boundary(f"Could not resolve {source}"):
                entry = self._store.entry_name(source)
            if entry in seen:
                raise InvalidCommandError(
                    f"{seen[entry]} and {source} would both be stored as {entry}",
                    hint="Rename one of them or add them to separate presets.",
                )
            seen[entry] = source

    def remove(self, name: str) -> None:
        """Delete preset *name* and all of its contents.

        Raises
        ------
        PresetNotFoundError
            If *name* is not in the store.
        PresetIOError
            If the directory cannot be fully removed.
        """
        self._require(name)
        with _io_boundary(f"Could not remove preset {name}"):
            self._store.delete(name)

    def inspect(self, name: str) -> Iterator[str]:
        """Return a lazy iterator over the rendered tree of preset *name*.

        Existence is checked eagerly; filesystem errors met while the
        iterator is consumed surface as :class:`PresetIOError`.
        """
        self._require(name)
        return self._tree_lines(name)

    def _tree_lines(self, name: str) -> Iterator[str]:
        with _io_boundary(f"Could not read preset {name}"):
            yield from render_tree(self._store.walk(name))
