"""Core / service layer — preset operations and pure transforms.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; storage goes through
  :class:`~cargo_preset.core.protocols.PresetStore`.
* No imports from ``cli`` or ``infra``.
"""

from cargo_preset.core.models import (
    AddCommand,
    ApplyCommand,
    Command,
    CopiedFile,
    InspectCommand,
    Invocation,
    ListCommand,
    RemoveCommand,
    TreeEntry,
)
from cargo_preset.core.preset_service import PresetService
from cargo_preset.core.protocols import PresetStore
from cargo_preset.core.tree_format import render_entry, render_tree

__all__: list[str] = [
    "AddCommand",
    "ApplyCommand",
    "Command",
    "CopiedFile",
    "InspectCommand",
    "Invocation",
    "ListCommand",
    "PresetService",
    "PresetStore",
    "RemoveCommand",
    "TreeEntry",
    "render_entry",
    "render_tree",
]
