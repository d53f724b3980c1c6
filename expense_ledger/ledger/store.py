"""Mini README: SQLite backed store owning the ``expenses`` table.

Structure:
    * SCHEMA_SQL / TABLE_EXISTS_SQL - table definition and the metadata check.
    * LedgerStore - connection owner exposing list, add, search, delete and clear.

The store is built explicitly and handed to the command line layer. It holds
one connection for its whole lifetime, creates the table on first use and
prints its reports through an injectable ``echo`` so tests can capture them.
Every statement commits on its own; storage errors are not caught here.
"""

from __future__ import annotations

import sqlite3
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

import typer

from ..interface.confirmation import confirm_keystroke
from ..logging_utils import get_logger
from .formatting import format_row, format_summary, id_column_width
from .records import ExpenseRecord, MissingFieldsError, parse_amount, parse_date

LOGGER = get_logger(__name__)

TABLE_NAME = "expenses"

TABLE_EXISTS_SQL = "SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = ?"

SCHEMA_SQL = """
CREATE TABLE expenses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    amount DECIMAL(6, 2) NOT NULL CHECK (amount >= 0.01 AND amount < 10000),
    memo TEXT NOT NULL CHECK (length(memo) > 0),
    created_on DATE NOT NULL DEFAULT (date('now', 'localtime'))
)
"""


class LedgerStore:
    """Own the expenses table and render reports about it.

    Example:
        store = LedgerStore("expenses.db")
        store.add("10.00", "coffee", "2024-01-01")
        store.list()
    """

    def __init__(
        self,
        database: Union[str, Path, sqlite3.Connection] = ":memory:",
        *,
        echo: Callable[[str], None] = typer.echo,
        confirm: Callable[[], bool] = confirm_keystroke,
    ) -> None:
        if isinstance(database, sqlite3.Connection):
            self._connection = database
        else:
            self._connection = sqlite3.connect(str(database))
        self._connection.row_factory = sqlite3.Row
        # SQLite's own lower() and LIKE only fold ASCII letters.
        self._connection.create_function("casefold", 1, str.casefold, deterministic=True)
        self._echo = echo
        self._confirm = confirm
        self._setup_schema()

    def _setup_schema(self) -> None:
        """Create the expenses table unless it already exists."""

        (count,) = self._connection.execute(TABLE_EXISTS_SQL, (TABLE_NAME,)).fetchone()
        if count == 0:
            with self._connection:
                self._connection.execute(SCHEMA_SQL)
            LOGGER.info("Created table %s", TABLE_NAME)

    def _fetch(self, sql: str, params: Sequence[object] = ()) -> List[ExpenseRecord]:
        LOGGER.debug("Query: %s %s", " ".join(sql.split()), list(params))
        rows = self._connection.execute(sql, params).fetchall()
        return [ExpenseRecord.from_row(row) for row in rows]

    def _execute(self, sql: str, params: Sequence[object] = ()) -> int:
        """Run one write statement in its own transaction; return affected rows."""

        LOGGER.debug("Statement: %s %s", " ".join(sql.split()), list(params))
        with self._connection:
            cursor = self._connection.execute(sql, params)
        return cursor.rowcount

    # Queries

    def records(self) -> List[ExpenseRecord]:
        """Return every record ordered by date, oldest first."""

        return self._fetch("SELECT * FROM expenses ORDER BY created_on ASC, id ASC")

    def matching(self, term: Optional[str]) -> List[ExpenseRecord]:
        """Return records whose memo contains ``term``, ignoring case.

        Rows come back in storage order, not sorted by date.
        """

        needle = term or ""
        return self._fetch(
            "SELECT * FROM expenses WHERE ? = '' OR instr(casefold(memo), casefold(?)) > 0",
            (needle, needle),
        )

    def find(self, expense_id: int) -> Optional[ExpenseRecord]:
        found = self._fetch("SELECT * FROM expenses WHERE id = ?", (expense_id,))
        return found[0] if found else None

    def count(self) -> int:
        (total,) = self._connection.execute("SELECT COUNT(*) FROM expenses").fetchone()
        return int(total)

    def max_id(self) -> Optional[int]:
        (largest,) = self._connection.execute("SELECT MAX(id) FROM expenses").fetchone()
        return None if largest is None else int(largest)

    # Operations

    def list(self) -> None:
        """Print every expense ordered by date followed by the total."""

        self._print_report(self.records())

    def add(
        self,
        amount: Optional[object],
        memo: Optional[str],
        created_on: Optional[Union[str, date]] = None,
    ) -> None:
        """Insert one expense; today's date is supplied by the table default."""

        if amount is None or str(amount).strip() == "" or not memo or not memo.strip():
            raise MissingFieldsError()
        value = parse_amount(amount)

        if created_on is None:
            self._execute(
                "INSERT INTO expenses (amount, memo) VALUES (?, ?)",
                (str(value), memo),
            )
        else:
            self._execute(
                "INSERT INTO expenses (amount, memo, created_on) VALUES (?, ?, ?)",
                (str(value), memo, parse_date(created_on).isoformat()),
            )
        LOGGER.info("Recorded expense of %s for %r", value, memo)

    def search(self, term: Optional[str]) -> None:
        """Print expenses whose memo contains ``term`` followed by their total."""

        self._print_report(self.matching(term))

    def delete_one(self, expense_id: int) -> None:
        """Delete a single expense by id, reporting what was removed."""

        record = self.find(expense_id)
        if record is None:
            self._echo(f"There is no expense with the id '{expense_id}'.")
            return

        self._execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
        LOGGER.info("Deleted expense %s", expense_id)
        self._echo("The following expense has been deleted:")
        self._print_rows([record])

    def delete_all(self) -> None:
        """Delete every expense after an explicit ``y`` confirmation."""

        self._echo("This will remove all expenses. Are you sure? (y/n)")
        if not self._confirm():
            return

        removed = self._execute("DELETE FROM expenses")
        LOGGER.info("Deleted all %s expenses", removed)
        self._echo("All expenses have been deleted.")

    # Rendering

    def _print_report(self, records: List[ExpenseRecord]) -> None:
        if not records:
            self._echo("There are no expenses.")
            return

        self._echo(f"There are {len(records)} expenses.")
        id_width = self._print_rows(records)
        for line in format_summary(records, id_width):
            self._echo(line)

    def _print_rows(self, records: List[ExpenseRecord]) -> int:
        """Echo each record aligned to the widest id in the whole table."""

        id_width = id_column_width(self.max_id())
        for record in records:
            self._echo(format_row(record, id_width))
        return id_width
