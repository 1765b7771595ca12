"""Infrastructure layer — everything that touches the filesystem.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Raw :class:`OSError` may escape; the core service maps it to
  :class:`~cargo_preset.exceptions.PresetIOError`.
"""

from cargo_preset.infra.local_store import LocalPresetStore, read_preset_names
from cargo_preset.infra.store_locator import CONFIG_DIRNAME, STORE_DIRNAME, locate_store
from cargo_preset.infra.walker import copy_file, copy_tree_contents, walk_tree

__all__: list[str] = [
    "CONFIG_DIRNAME",
    "LocalPresetStore",
    "STORE_DIRNAME",
    "copy_file",
    "copy_tree_contents",
    "locate_store",
    "read_preset_names",
    "walk_tree",
]
