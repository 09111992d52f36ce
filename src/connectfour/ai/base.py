from __future__ import annotations
from typing import Protocol

from connectfour.core.board import Board
from connectfour.game.state import GameState
from connectfour.types import Move, Player


class MoveSelector(Protocol):
    name: str

    def select_column(self, board: Board, me: Player, opponent: Player) -> Move:
        ...

    def choose_move(self, state: GameState) -> Move:
        ...
