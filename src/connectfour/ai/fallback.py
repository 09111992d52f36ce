from __future__ import annotations
import random

from connectfour.core.board import Board
from connectfour.core.errors import IllegalMoveError
from connectfour.types import Move


def probe_column(board: Board, rng: random.Random) -> Move:
    """
    Pick a random 1-indexed start column, then walk right (wrapping) until a
    playable column turns up. Returns it 0-indexed.
    """
    if board.is_full():
        raise IllegalMoveError("No valid moves.")

    col = rng.randint(1, board.cols)
    while not board.can_play(col - 1):
        col += 1
        if col > board.cols:
            col = 1
    return Move(col - 1)
