from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence

from connectfour.config import CONNECT_N
from connectfour.types import Cell, Coord, Player

if TYPE_CHECKING:
    from connectfour.core.board import Board


def _lines(rows: int, cols: int) -> Iterator[List[Coord]]:
    """
    Every CONNECT_N-long window on the grid, in scan order:
    horizontal rows top to bottom, vertical columns left to right from the
    bottom up, diagonal falling right, diagonal rising right.
    """
    n = CONNECT_N

    # Horizontal, top row (highest index) first
    for r in range(rows - 1, -1, -1):
        for c in range(cols - n + 1):
            yield [(r, c + i) for i in range(n)]

    # Vertical
    for c in range(cols):
        for r in range(rows - n + 1):
            yield [(r + i, c) for i in range(n)]

    # Diagonal falling right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            yield [(r - i, c + i) for i in range(n)]

    # Diagonal rising right (row index grows upward)
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            yield [(r + i, c + i) for i in range(n)]


def find_line(grid: Sequence[Sequence[Cell]], player: Player) -> Optional[List[Coord]]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for line in _lines(rows, cols):
        if all(grid[r][c] == player for r, c in line):
            return line
    return None


def is_draw(board: "Board") -> bool:
    return board.is_full() and not board.check_win("X") and not board.check_win("O")
