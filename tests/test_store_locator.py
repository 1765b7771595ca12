"""Tests for store resolution (infra/store_locator.py).

Coverage:
* Missing / empty ``HOME``.
* Missing ``$HOME/.config`` is an error and is never created.
* The ``cargo_preset`` level is created on first use.
* ``os.environ`` is used when no mapping is injected.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cargo_preset.exceptions import (
    ConfigDirectoryNotFoundError,
    HomeDirectoryNotFoundError,
)
from cargo_preset.infra.store_locator import STORE_DIRNAME, locate_store


class TestLocateStore:
    def test_missing_home(self) -> None:
        with pytest.raises(HomeDirectoryNotFoundError, match="Home directory not found"):
            locate_store({})

    def test_empty_home(self) -> None:
        with pytest.raises(HomeDirectoryNotFoundError):
            locate_store({"HOME": ""})

    def test_missing_config_dir(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigDirectoryNotFoundError) as exc_info:
            locate_store({"HOME": str(tmp_path)})
        assert exc_info.value.hint is not None
        assert not (tmp_path / ".config").exists()

    def test_creates_store(self, home: Path) -> None:
        root = locate_store({"HOME": str(home)})
        assert root == home / ".config" / STORE_DIRNAME
        assert root.is_dir()

    def test_existing_store_is_kept(self, store_root: Path, home: Path) -> None:
        (store_root / "demo").mkdir()
        root = locate_store({"HOME": str(home)})
        assert root == store_root
        assert (root / "demo").is_dir()

    def test_reads_process_environment_by_default(self, home: Path) -> None:
        assert locate_store() == home / ".config" / STORE_DIRNAME

    def test_logs_creation_at_debug(
        self, home: Path, caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="cargo_preset")
        locate_store({"HOME": str(home)})
        assert "Creating cargo_preset configuration directory" in caplog.text

    def test_no_creation_message_when_present(
        self, store_root: Path, home: Path, caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="cargo_preset")
        locate_store({"HOME": str(home)})
        assert "Creating" not in caplog.text
