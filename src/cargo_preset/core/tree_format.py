"""Text rendering of directory-tree entries for ``inspect``.

Pure transforms — no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from cargo_preset.core.models import TreeEntry

DEFAULT_MARKER: str = "-"
DIRECTORY_SUFFIX: str = "/"


def render_entry(entry: TreeEntry, marker: str = DEFAULT_MARKER) -> str:
    """Render one entry as ``"<marker * (depth + 1)> <name>[/]"``.

    >>> from pathlib import Path
    >>> render_entry(TreeEntry(Path("a.txt"), Path("a.txt"), 0, False))
    '- a.txt'
    >>> render_entry(TreeEntry(Path("src"), Path("src"), 1, True))
    '-- src/'
    """
    suffix = DIRECTORY_SUFFIX if entry.is_dir else ""
    return f"{marker * (entry.depth + 1)} {entry.name}{suffix}"


def render_tree(
    entries: Iterable[TreeEntry],
    marker: str = DEFAULT_MARKER,
) -> Iterator[str]:
    """Lazily render *entries*, one line per entry."""
    for entry in entries:
        yield render_entry(entry, marker)
