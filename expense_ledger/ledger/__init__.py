"""Mini README: Persistent expense ledger and its reporting helpers.

``store`` owns the SQLite table and the five user operations, ``records``
defines the row model and input validation, and ``formatting`` renders the
fixed-width report lines.
"""

from .records import (
    ExpenseRecord,
    InvalidAmountError,
    InvalidDateError,
    LedgerError,
    MissingFieldsError,
)
from .store import LedgerStore

__all__ = [
    "ExpenseRecord",
    "InvalidAmountError",
    "InvalidDateError",
    "LedgerError",
    "LedgerStore",
    "MissingFieldsError",
]
