# src/connectfour/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

from connectfour.config import ROWS, COLS
from connectfour.core.errors import IllegalMoveError, RangeError
from connectfour.core.rules import find_line
from connectfour.types import Cell, Coord, Player, Move

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Board:
    """
    Fixed-size Connect Four grid.

    grid[row][col], row 0 is the bottom row. Tokens fall to the lowest empty
    row of a column, so every column is a gap-free stack starting at row 0.
    """
    rows: ClassVar[int] = ROWS
    cols: ClassVar[int] = COLS
    grid: List[List[Cell]] = field(default_factory=list, init=False)
    last_move: Optional[Tuple[int, int]] = field(default=None, init=False)  # (col, row), for highlighting only

    def __post_init__(self) -> None:
        self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def copy(self) -> "Board":
        b = Board()
        b.grid = [row[:] for row in self.grid]
        b.last_move = self.last_move
        return b

    def reset(self) -> None:
        self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        self.last_move = None

    def _check_col(self, col: int) -> int:
        if isinstance(col, bool) or not isinstance(col, int):
            raise TypeError(f"Column must be an int, got {type(col).__name__}.")
        if col < 0 or col >= self.cols:
            raise RangeError("Column out of range.")
        return col

    def cell_at(self, row: int, col: int) -> Cell:
        if isinstance(row, bool) or not isinstance(row, int):
            raise TypeError(f"Row must be an int, got {type(row).__name__}.")
        if row < 0 or row >= self.rows:
            raise RangeError("Row out of range.")
        c = self._check_col(col)
        return self.grid[row][c]

    def column_height(self, col: int) -> int:
        c = self._check_col(col)
        height = 0
        while height < self.rows and self.grid[height][c] is not None:
            height += 1
        return height

    def can_play(self, col: int) -> bool:
        return self.column_height(col) < self.rows

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[self.rows - 1][c] is None]

    def is_full(self) -> bool:
        return not any(self.can_play(c) for c in range(self.cols))

    def apply_move(self, player: Player, col: int) -> int:
        """
        Drop `player`'s token into `col` and return the row it landed on.
        Raises IllegalMoveError on a full column; the board is left untouched.
        """
        c = self._check_col(col)
        r = self.column_height(c)
        if r >= self.rows:
            raise IllegalMoveError("Column is full.")

        self.grid[r][c] = player
        self.last_move = (c, r)
        logger.debug("placed %s at col=%d row=%d", player, c, r)
        return r

    def check_win(self, player: Player) -> bool:
        return find_line(self.grid, player) is not None

    def winning_line(self, player: Player) -> Optional[List[Coord]]:
        return find_line(self.grid, player)

    def is_last_move(self, row: int, col: int) -> bool:
        return self.last_move is not None and self.last_move == (col, row)
