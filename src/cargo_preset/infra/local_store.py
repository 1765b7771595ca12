"""Filesystem-backed implementation of :class:`~cargo_preset.core.protocols.PresetStore`.

The store directory is the whole database: every immediate
subdirectory is one preset, named after the directory.  There is no
index or metadata file.

Methods raise plain :class:`OSError`; the service layer wraps them.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterator
from pathlib import Path

from cargo_preset.core.models import CopiedFile, TreeEntry
from cargo_preset.infra.walker import copy_file, copy_tree_contents, walk_tree


def read_preset_names(root: Path) -> list[str]:
    """Return the sorted names of the immediate subdirectories of *root*.

    Raises
    ------
    OSError
        If *root* cannot be listed.
    """
    return sorted(child.name for child in Path(root).iterdir() if child.is_dir())


class LocalPresetStore:
    """Concrete :class:`PresetStore` rooted at a directory on disk.

    Satisfies the protocol structurally — no explicit inheritance.
    """

    def __init__(self, root: Path) -> None:
        self._root: Path = Path(root)

    def path_for(self, name: str) -> Path:
        return self._root / name

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def names(self) -> list[str]:
        return read_preset_names(self._root)

    def create(self, name: str) -> None:
        self.path_for(name).mkdir()

    @staticmethod
    def entry_name(source: Path) -> str:
        source = Path(source)
        # "." and ".." only get a real base name once resolved.
        if source.name in ("", ".."):
            return source.resolve().name
        return source.name

    def add_file(self, name: str, source: Path) -> CopiedFile:
        source = Path(source)
        target = self.path_for(name) / self.entry_name(source)
        size = copy_file(source, target, overwrite=False)
        return CopiedFile(source=source, destination=target, size=size)

    def add_directory(self, name: str, source: Path) -> None:
        source = Path(source)
        target = self.path_for(name) / self.entry_name(source)
        copy_tree_contents(source, target, overwrite=False)

    def materialize(self, name: str, destination: Path) -> None:
        copy_tree_contents(self.path_for(name), destination, overwrite=True)

    def delete(self, name: str) -> None:
        shutil.rmtree(self.path_for(name))

    def walk(self, name: str) -> Iterator[TreeEntry]:
        return walk_tree(self.path_for(name))
