"""Mini README: Fixed-width rendering of expense rows and summaries.

Structure:
    * id_column_width - width of the id column given the table's largest id.
    * format_row - pipe-delimited, right-aligned rendering of one record.
    * format_summary - separator line plus the total aligned to the amount column.

All helpers are pure; the store passes in the maximum id of the whole table
so search results and deletion notices line up with a full listing.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional

from .records import ExpenseRecord

PAD_ID = 3
PAD_DATE = 10
PAD_AMOUNT = 12
SEPARATOR = " | "
RULE_WIDTH = 50


def id_column_width(max_id: Optional[int]) -> int:
    """Return the base id width grown by any extra digits of ``max_id``."""

    if max_id is None:
        return PAD_ID
    return PAD_ID + max(0, len(str(max_id)) - PAD_ID)


def format_row(record: ExpenseRecord, id_width: int) -> str:
    return SEPARATOR.join(
        [
            str(record.expense_id).rjust(id_width),
            record.created_on.isoformat().rjust(PAD_DATE),
            f"{record.amount:.2f}".rjust(PAD_AMOUNT),
            record.memo,
        ]
    )


def total_amount(records: Iterable[ExpenseRecord]) -> Decimal:
    return sum((record.amount for record in records), Decimal("0.00"))


def format_summary(records: Iterable[ExpenseRecord], id_width: int) -> List[str]:
    """Return the rule and total lines closing a report.

    The total field spans the id, date and amount columns plus one, which
    places the last digit of the total under the last digit of each amount
    once the ``Total`` label is prepended.
    """

    total_padding = id_width + PAD_DATE + PAD_AMOUNT + 1
    total = f"{total_amount(records):.2f}"
    return ["-" * RULE_WIDTH, f"Total{total.rjust(total_padding)}"]
