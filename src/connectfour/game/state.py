from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from connectfour.core.board import Board
from connectfour.types import Player, PLAYER1


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = PLAYER1
    last_status: str = "Player 1 starts."
    winner: Optional[Player] = None
    terminal: bool = False

    def reset(self) -> None:
        self.board.reset()
        self.current = PLAYER1
        self.last_status = "Player 1 starts."
        self.winner = None
        self.terminal = False
