"""Mini README: Expense record model and input coercion helpers.

Structure:
    * LedgerError - base class for user-facing input errors.
    * MissingFieldsError / InvalidAmountError / InvalidDateError - specific failures.
    * ExpenseRecord - dataclass mirroring one row of the ``expenses`` table.
    * parse_amount / parse_date - coerce raw command line values before storage.

Validation happens here, before any database round-trip, so a rejected
``add`` never touches the table. The table's CHECK constraints repeat the
amount rule as a second line of defence for writers that bypass the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Mapping

CENTS = Decimal("0.01")
MIN_AMOUNT = Decimal("0.01")
MAX_AMOUNT = Decimal("9999.99")


class LedgerError(ValueError):
    """Input problem reported to the user instead of a traceback."""


class MissingFieldsError(LedgerError):
    """Raised when ``add`` is called without an amount or memo."""

    def __init__(self) -> None:
        super().__init__("You must provide an amount and memo.")


class InvalidAmountError(LedgerError):
    """Raised for amounts that are not decimals within the column range."""


class InvalidDateError(LedgerError):
    """Raised for dates that are not ISO formatted calendar dates."""


@dataclass(slots=True, frozen=True)
class ExpenseRecord:
    """Represent a persisted expense entry."""

    expense_id: int
    amount: Decimal
    memo: str
    created_on: date

    @classmethod
    def from_row(cls, row: Mapping[str, object]) -> "ExpenseRecord":
        """Build a record from a ``sqlite3.Row`` of the expenses table."""

        return cls(
            expense_id=int(row["id"]),
            amount=parse_amount(row["amount"]),
            memo=str(row["memo"]),
            created_on=parse_date(row["created_on"]),
        )


def parse_amount(value: object) -> Decimal:
    """Coerce a raw amount into a two-decimal ``Decimal`` within range."""

    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite():
            raise InvalidAmountError(f"Invalid amount: {value}")
        # quantize signals InvalidOperation once the result outgrows the context precision.
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as error:
        raise InvalidAmountError(f"Invalid amount: {value}") from error

    if amount < MIN_AMOUNT:
        raise InvalidAmountError(f"Amount must be at least {MIN_AMOUNT}: {value}")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount must not exceed {MAX_AMOUNT}: {value}")
    return amount


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (str, bytes)):
        text = value.decode() if isinstance(value, bytes) else value
        try:
            return date.fromisoformat(text.strip())
        except ValueError as error:
            raise InvalidDateError(f"Invalid date (expected YYYY-MM-DD): {text}") from error
    raise InvalidDateError("Dates must be provided as ISO strings or date/datetime instances.")
