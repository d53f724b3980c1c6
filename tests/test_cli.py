"""Mini README: Tests for the Typer command line dispatcher.

Each test points the CLI at a temporary database through ``--database`` and
drives it with ``typer.testing.CliRunner``; the runner also feeds the single
keystroke read by ``clear``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from expense_cli import cli
from expense_ledger.configuration import get_settings
from expense_ledger.ledger import LedgerStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EXPENSES_DATABASE_PATH", str(tmp_path / "configured.db"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _run(database: Path, *args: str, **kwargs):
    return runner.invoke(cli, ["--database", str(database), *args], **kwargs)


def test_add_then_list(database_path: Path) -> None:
    assert _run(database_path, "add", "10.00", "coffee", "2024-01-01").exit_code == 0
    assert _run(database_path, "add", "25.50", "books", "2024-02-01").exit_code == 0

    result = _run(database_path, "list")

    assert result.exit_code == 0
    assert "There are 2 expenses." in result.output
    assert "  1 | 2024-01-01 |        10.00 | coffee" in result.output
    assert "Total" + "35.50".rjust(26) in result.output


def test_add_without_memo_stops_with_message(database_path: Path) -> None:
    result = _run(database_path, "add", "10.00")

    assert result.exit_code == 1
    assert "You must provide an amount and memo." in result.output
    assert LedgerStore(database_path).count() == 0


def test_search_and_delete(database_path: Path) -> None:
    _run(database_path, "add", "10.00", "coffee", "2024-01-01")
    _run(database_path, "add", "25.50", "books", "2024-02-01")

    searched = _run(database_path, "search", "COFFEE")
    assert "There are 1 expenses." in searched.output
    assert "books" not in searched.output

    deleted = _run(database_path, "delete", "1")
    assert "The following expense has been deleted:" in deleted.output

    missing = _run(database_path, "delete", "1")
    assert "There is no expense with the id '1'." in missing.output
    assert missing.exit_code == 0


def test_clear_reads_single_keystroke(database_path: Path) -> None:
    _run(database_path, "add", "10.00", "coffee", "2024-01-01")

    declined = _run(database_path, "clear", input="n")
    assert "All expenses have been deleted." not in declined.output
    assert LedgerStore(database_path).count() == 1

    confirmed = _run(database_path, "clear", input="xy")
    assert "This is incorrect input. Please, try again." in confirmed.output
    assert "All expenses have been deleted." in confirmed.output
    assert LedgerStore(database_path).count() == 0


def test_configured_database_is_used_without_option(tmp_path: Path) -> None:
    assert runner.invoke(cli, ["add", "3.00", "tea", "2024-01-01"]).exit_code == 0

    assert LedgerStore(tmp_path / "configured.db").count() == 1


def test_unknown_or_missing_command_prints_usage(database_path: Path) -> None:
    assert "Usage" in runner.invoke(cli, []).output

    result = _run(database_path, "frobnicate")
    assert result.exit_code != 0
    assert "No such command" in result.output
    assert not database_path.exists()


def test_command_help_leaves_database_untouched(database_path: Path) -> None:
    result = _run(database_path, "add", "--help")

    assert result.exit_code == 0
    assert "Record a new expense." in result.output
    assert not database_path.exists()
