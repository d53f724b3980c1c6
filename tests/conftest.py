"""Mini README: Shared fixtures for the expense ledger tests.

Provides a ``store`` backed by a temporary SQLite file whose output is
collected into a list instead of being printed.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from expense_ledger.ledger import LedgerStore


class Transcript(list):
    """List of echoed lines with a helper to reset between steps."""

    def take(self) -> List[str]:
        lines = list(self)
        self.clear()
        return lines


@pytest.fixture()
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "expenses.db"


@pytest.fixture()
def transcript() -> Transcript:
    return Transcript()


@pytest.fixture()
def store(database_path: Path, transcript: Transcript) -> LedgerStore:
    return LedgerStore(database_path, echo=transcript.append, confirm=lambda: False)
