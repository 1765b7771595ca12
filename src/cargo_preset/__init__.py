"""cargo-preset — personal preset manager.

Stores named collections of files and directories under
``~/.config/cargo_preset`` and copies them into the current working
directory on demand.
"""

from cargo_preset.version import __version__

__all__: list[str] = ["__version__"]
