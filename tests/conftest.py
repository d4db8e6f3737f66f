import io
from typing import Callable

import pytest

from subnim.console_io import ConsoleIO
from subnim.rules import Rules


@pytest.fixture
def default_rules() -> Rules:
    """The rules a new session starts with: take 1 or 2 of 20, last take wins."""
    return Rules()


@pytest.fixture
def misere_rules() -> Rules:
    return Rules.create(max_take=3, target_score=10, winner_takes_last=False)


@pytest.fixture
def make_console() -> Callable[[str], ConsoleIO]:
    """Build a ConsoleIO reading the given text and writing to a StringIO."""

    def _make(input_text: str = "") -> ConsoleIO:
        return ConsoleIO(io.StringIO(input_text), io.StringIO())

    return _make
