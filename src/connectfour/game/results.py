from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from connectfour.core.board import Board
from connectfour.core.rules import is_draw
from connectfour.types import Player


@dataclass(frozen=True, slots=True)
class Continue:
    pass


@dataclass(frozen=True, slots=True)
class Win:
    player: Player


@dataclass(frozen=True, slots=True)
class Draw:
    pass


TurnResult = Union[Continue, Win, Draw]


def is_terminal(result: TurnResult) -> bool:
    return not isinstance(result, Continue)


def outcome_after(board: Board, mover: Player) -> TurnResult:
    """
    Result of the move `mover` just made: a line for the mover wins, a full
    board without any line is a draw.
    """
    if board.check_win(mover):
        return Win(mover)
    if is_draw(board):
        return Draw()
    return Continue()
