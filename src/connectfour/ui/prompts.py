from __future__ import annotations

from connectfour.core.errors import InputExhausted
from connectfour.types import Move

QUIT_WORDS = {"q", "quit", "exit"}


def parse_column(raw: str, cols: int) -> Move:
    """
    Turn a 1-indexed column typed by the player into a 0-indexed Move.
    Raises InputExhausted for a quit word and ValueError for anything else
    that isn't a column on the board.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        raise InputExhausted("Player quit.")
    if not s.isdigit():
        raise ValueError(f"Invalid input. Please enter a column number between 1 and {cols}.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Invalid input. Please enter a column number between 1 and {cols}.")
    return Move(col)
