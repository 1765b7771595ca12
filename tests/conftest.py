"""Shared pytest fixtures and configuration for the cargo-preset test suite.

Guidelines
----------
* Every test runs against a throwaway ``HOME`` under ``tmp_path``.
* Tests never touch the real ``~/.config``.
* The working directory is switched with ``monkeypatch.chdir`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from cargo_preset.cli.logging_setup import LOGGER_NAME
from cargo_preset.infra.local_store import LocalPresetStore
from cargo_preset.infra.store_locator import CONFIG_DIRNAME, STORE_DIRNAME


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo whatever ``configure_logging`` did so caplog keeps working."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fake ``HOME`` with an existing ``.config`` directory."""
    home_dir = tmp_path / "home"
    (home_dir / CONFIG_DIRNAME).mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture()
def store_root(home: Path) -> Path:
    root = home / CONFIG_DIRNAME / STORE_DIRNAME
    root.mkdir()
    return root


@pytest.fixture()
def store(store_root: Path) -> LocalPresetStore:
    return LocalPresetStore(store_root)


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty directory that is also the current working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture()
def sources(tmp_path: Path) -> Path:
    """Source material for presets::

        src/
        ├── a.txt            "hello"
        ├── b.txt            "world"
        └── conf/
            ├── settings.toml
            └── nested/
                └── deep.txt
    """
    src = tmp_path / "src"
    (src / "conf" / "nested").mkdir(parents=True)
    (src / "a.txt").write_text("hello")
    (src / "b.txt").write_text("world")
    (src / "conf" / "settings.toml").write_text("debug = true\n")
    (src / "conf" / "nested" / "deep.txt").write_text("deep")
    return src
