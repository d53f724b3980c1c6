"""Mini README: Single keystroke yes/no confirmation used before bulk deletes.

``confirm_keystroke`` reads one raw key without waiting for Enter and keeps
asking until the answer is ``y`` or ``n``. The key reader and the output
function are injectable so tests can script the keystrokes.
"""

from __future__ import annotations

from typing import Callable

import typer

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def confirm_keystroke(
    read_key: Callable[[], str] = typer.getchar,
    echo: Callable[[str], None] = typer.echo,
) -> bool:
    """Block until the user presses ``y`` or ``n``; return ``True`` for ``y``."""

    while True:
        choice = read_key().casefold()
        if choice in ("y", "n"):
            LOGGER.debug("Confirmation answered with %r", choice)
            return choice == "y"
        echo(f"You answered '{choice}'. This is incorrect input. Please, try again.")
