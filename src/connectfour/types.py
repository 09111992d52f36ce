# src/connectfour/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]       # None is an empty cell
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col), row 0 is the bottom

PLAYER1: Player = "X"  # human
PLAYER2: Player = "O"  # heuristic


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


def player_label(player: Player) -> str:
    return "Player 1" if player == PLAYER1 else "Player 2"
