"""Tests for command-line parsing (cli/parser.py).

Coverage:
* Each subcommand maps to its typed command value.
* ``--debug`` / ``-d`` global flag.
* ``add`` requires ``--files`` or ``--directories``.
* Invalid input exits with status 2 before any filesystem access.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_preset.cli import exit_codes
from cargo_preset.cli.parser import parse_invocation
from cargo_preset.core.models import (
    AddCommand,
    ApplyCommand,
    InspectCommand,
    Invocation,
    ListCommand,
    RemoveCommand,
)
from cargo_preset.exceptions import InvalidCommandError


def _parse(*argv: str) -> Invocation:
    invocation = parse_invocation(list(argv))
    assert invocation is not None
    return invocation


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

class TestSubcommands:
    def test_apply(self) -> None:
        assert _parse("apply", "demo").command == ApplyCommand(name="demo")

    def test_list(self) -> None:
        assert _parse("list").command == ListCommand()

    def test_remove(self) -> None:
        assert _parse("remove", "demo").command == RemoveCommand(name="demo")

    def test_inspect(self) -> None:
        assert _parse("inspect", "demo").command == InspectCommand(name="demo")

    def test_no_subcommand_returns_none(self) -> None:
        assert parse_invocation([]) is None

    def test_unknown_subcommand_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_invocation(["frobnicate"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR

    def test_apply_without_name_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_invocation(["apply"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_files_only(self) -> None:
        command = _parse("add", "demo", "--files", "a.txt", "b.txt").command
        assert command == AddCommand(
            name="demo", files=(Path("a.txt"), Path("b.txt")),
        )

    def test_directories_only(self) -> None:
        command = _parse("add", "demo", "--directories", ".github").command
        assert isinstance(command, AddCommand)
        assert command.files == ()
        assert command.directories == (Path(".github"),)

    def test_files_and_directories(self) -> None:
        command = _parse(
            "add", "demo", "--files", "a.txt", "--directories", "conf", "ci",
        ).command
        assert isinstance(command, AddCommand)
        assert command.files == (Path("a.txt"),)
        assert command.directories == (Path("conf"), Path("ci"))

    def test_neither_is_usage_error(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_invocation(["add", "demo"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR
        assert "--files or --directories" in capsys.readouterr().err

    def test_empty_files_flag_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_invocation(["add", "demo", "--files"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR

    def test_model_rejects_empty_add(self) -> None:
        with pytest.raises(InvalidCommandError):
            AddCommand(name="demo")


# ---------------------------------------------------------------------------
# Global flags
# ---------------------------------------------------------------------------

class TestGlobalFlags:
    def test_debug_defaults_off(self) -> None:
        assert _parse("list").debug is False

    @pytest.mark.parametrize("flag", ["-d", "--debug"])
    def test_debug_flag(self, flag: str) -> None:
        invocation = _parse(flag, "list")
        assert invocation.debug is True
        assert invocation.command == ListCommand()

    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_invocation(["--help"])
        assert exc_info.value.code == 0
