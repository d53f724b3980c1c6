"""Mini README: Terminal interaction helpers for the expense ledger.

Holds the keystroke confirmation gate used by bulk deletion. The Typer
command definitions live in the top-level ``expense_cli`` script.
"""

from .confirmation import confirm_keystroke

__all__ = ["confirm_keystroke"]
