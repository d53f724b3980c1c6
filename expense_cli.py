"""Mini README: Entry point CLI for the expense ledger.

This script exposes a Typer CLI mapping the ``list``, ``add``, ``search``,
``delete`` and ``clear`` commands onto a ``LedgerStore``. The store is built
per invocation from the configured database path (or ``--database``)
and is opened only when a command body runs, so help output never touches
the database file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from expense_ledger.configuration import get_settings
from expense_ledger.ledger import LedgerError, LedgerStore
from expense_ledger.logging_utils import configure_root_logger

cli = typer.Typer(
    help="An expense recording system.",
    no_args_is_help=True,
    add_completion=False,
)


@cli.callback()
def main(
    ctx: typer.Context,
    database: Optional[Path] = typer.Option(
        None, help="SQLite file to use instead of the configured one."
    ),
) -> None:
    """An expense recording system."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    ctx.obj = database or settings.database_path


def _store(ctx: typer.Context) -> LedgerStore:
    """Open the ledger only once a command actually runs."""

    return LedgerStore(ctx.obj)


@cli.command("list")
def list_expenses(ctx: typer.Context) -> None:
    """List all expenses."""

    _store(ctx).list()


@cli.command()
def add(
    ctx: typer.Context,
    amount: Optional[str] = typer.Argument(None, help="Amount spent, e.g. 12.50."),
    memo: Optional[str] = typer.Argument(None, help="What the money was spent on."),
    date: Optional[str] = typer.Argument(None, help="Date as YYYY-MM-DD; defaults to today."),
) -> None:
    """Record a new expense."""

    try:
        _store(ctx).add(amount, memo, date)
    except LedgerError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error


@cli.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Text to look for in the memo field."),
) -> None:
    """List expenses with a matching memo field."""

    _store(ctx).search(query)


@cli.command()
def delete(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Id of the expense to remove."),
) -> None:
    """Remove the expense with id NUMBER."""

    _store(ctx).delete_one(number)


@cli.command()
def clear(ctx: typer.Context) -> None:
    """Delete all expenses."""

    _store(ctx).delete_all()


if __name__ == "__main__":
    cli()
