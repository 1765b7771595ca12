"""Infrastructure: depth-first directory traversal and tree copy.

Both :func:`walk_tree` and :func:`copy_tree_contents` use an explicit
stack rather than recursion, so arbitrarily deep trees never exhaust
the interpreter stack.

Symlink policy
--------------
Symlinks are followed.  A directory whose ``(st_dev, st_ino)`` pair
already appears on the current ancestor chain is reported with
``cycle=True`` and not descended into.

Rules
-----
* No per-entry error isolation: any :class:`OSError` aborts the walk.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from collections.abc import Iterator
from pathlib import Path

from cargo_preset.core.models import TreeEntry

logger = logging.getLogger(__name__)

_DirKey = tuple[int, int]


def _dir_key(path: Path) -> _DirKey:
    st = path.stat()
    return st.st_dev, st.st_ino


def _sorted_children(directory: Path) -> Iterator[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        return iter(sorted(it, key=lambda entry: entry.name))


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def walk_tree(root: Path, depth: int = 0) -> Iterator[TreeEntry]:
    """Lazily yield every entry under *root*, depth-first, in name order.

    Immediate children of *root* are reported at *depth*; each level
    below adds one.  A directory is yielded before its contents.  The
    generator is single-pass.

    Raises
    ------
    OSError
        If any directory cannot be listed or any entry cannot be stat'ed.
    """
    root = Path(root)
    # Frames: (remaining siblings, relative dir, depth, ancestor keys).
    stack: list[tuple[Iterator[os.DirEntry[str]], Path, int, frozenset[_DirKey]]] = [
        (_sorted_children(root), Path(), depth, frozenset({_dir_key(root)})),
    ]
    while stack:
        siblings, relative, level, ancestors = stack[-1]
        child = next(siblings, None)
        if child is None:
            stack.pop()
            continue

        path = Path(child.path)
        rel = relative / child.name
        if not child.is_dir():
            yield TreeEntry(path=path, relative=rel, depth=level, is_dir=False)
            continue

        key = _dir_key(path)
        if key in ancestors:
            logger.warning("Not following directory cycle at %s", path)
            yield TreeEntry(path=path, relative=rel, depth=level, is_dir=True, cycle=True)
            continue

        yield TreeEntry(path=path, relative=rel, depth=level, is_dir=True)
        stack.append((_sorted_children(path), rel, level + 1, ancestors | {key}))


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------

def copy_file(source: Path, target: Path, *, overwrite: bool) -> int:
    """Copy one regular file to *target* and return the bytes written.

    Permission bits are copied along with the content.

    Raises
    ------
    FileExistsError
        If *target* exists and *overwrite* is false.
    IsADirectoryError
        If *target* is an existing directory.
    """
    if target.is_dir():
        raise IsADirectoryError(errno.EISDIR, "Destination is a directory", str(target))
    if not overwrite and target.exists():
        raise FileExistsError(errno.EEXIST, "Destination file already exists", str(target))
    shutil.copy(source, target)
    return target.stat().st_size


def copy_tree_contents(source: Path, destination: Path, *, overwrite: bool) -> None:
    """Copy everything under *source* into *destination*.

    *destination* is created if missing (its parent must exist).
    Directories already present are merged into.  Nothing is rolled
    back if a copy fails part-way.
    """
    source = Path(source)
    destination = Path(destination)
    destination.mkdir(exist_ok=True)
    for entry in walk_tree(source):
        target = destination / entry.relative
        if entry.is_dir:
            target.mkdir(exist_ok=True)
            continue
        copy_file(entry.path, target, overwrite=overwrite)
