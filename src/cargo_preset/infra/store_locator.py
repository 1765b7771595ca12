"""Infrastructure: locate (and lazily create) the preset store.

The store lives at ``$HOME/.config/cargo_preset``.  Only the final
``cargo_preset`` level is ever created; ``$HOME/.config`` must already
exist.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from cargo_preset.exceptions import (
    ConfigDirectoryNotFoundError,
    HomeDirectoryNotFoundError,
    PresetIOError,
)

logger = logging.getLogger(__name__)

CONFIG_DIRNAME: str = ".config"
STORE_DIRNAME: str = "cargo_preset"


def locate_store(environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the store root, creating its last level when absent.

    Parameters
    ----------
    environ:
        Environment mapping to read ``HOME`` from.  Defaults to
        :data:`os.environ`.

    Raises
    ------
    HomeDirectoryNotFoundError
        If ``HOME`` is unset or empty.
    ConfigDirectoryNotFoundError
        If ``$HOME/.config`` does not exist.
    PresetIOError
        If the store directory cannot be created.
    """
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if not home:
        raise HomeDirectoryNotFoundError(
            "Home directory not found",
            hint="Set the HOME environment variable.",
        )

    config_dir = Path(home) / CONFIG_DIRNAME
    if not config_dir.exists():
        raise ConfigDirectoryNotFoundError(
            "$HOME/.config directory not found",
            hint=f"Create it with: mkdir {config_dir}",
        )

    store = config_dir / STORE_DIRNAME
    if not store.exists():
        logger.debug("Creating cargo_preset configuration directory")
        try:
            store.mkdir()
        except OSError as exc:
            raise PresetIOError(f"Could not create {store}: {exc}") from exc

    logger.debug("Using preset store %s", store)
    return store
