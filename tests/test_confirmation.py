"""Mini README: Tests for the keystroke confirmation gate."""

from __future__ import annotations

from typing import Iterator, List

from expense_ledger.interface import confirm_keystroke


def _keys(*presses: str):
    iterator: Iterator[str] = iter(presses)
    return lambda: next(iterator)


def test_confirm_accepts_upper_case_yes() -> None:
    assert confirm_keystroke(read_key=_keys("Y"), echo=lambda line: None) is True


def test_confirm_returns_false_for_no() -> None:
    assert confirm_keystroke(read_key=_keys("n"), echo=lambda line: None) is False


def test_confirm_reprompts_until_valid_key() -> None:
    """Every invalid key produces a retry message before the next read."""

    messages: List[str] = []

    answer = confirm_keystroke(read_key=_keys("x", "Q", "y"), echo=messages.append)

    assert answer is True
    assert messages == [
        "You answered 'x'. This is incorrect input. Please, try again.",
        "You answered 'q'. This is incorrect input. Please, try again.",
    ]
