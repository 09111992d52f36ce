from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

from connectfour import config
from connectfour.core.board import Board
from connectfour.types import Cell, Coord
from connectfour.ui.colors import BOLD, CLEAR, DIM, FG_CYAN, FG_GRAY, FG_RED, RESET, REVERSE, style
from connectfour.ui.effects import ai_thinking, beep


def _piece(cell: Cell, color: bool) -> str:
    if cell is None:
        return style(".", FG_GRAY, color)
    if cell == "X":
        return style("X", FG_RED, color)
    return "O"


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None, color: bool = True) -> List[str]:
    """
    The board as printable lines: top row (highest index) first, then the
    column labels and a separator.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()
    lines = []

    for r in range(board.rows - 1, -1, -1):
        parts = []
        for c in range(board.cols):
            p = _piece(board.grid[r][c], color)
            if board.is_last_move(r, c) or (r, c) in hl:
                p = f"{REVERSE}{p}{RESET}" if color else f"[{p}]"
            elif not color:
                p = f" {p} "
            parts.append(p)
        lines.append(" " + " ".join(parts))

    if color:
        labels = " " + " ".join(str(c + 1) for c in range(board.cols))
    else:
        labels = " " + " ".join(f" {c + 1} " for c in range(board.cols))
    lines.append(style(labels, DIM, color))
    lines.append("**" * board.cols)
    return lines


@dataclass
class ConsoleOutput:
    use_color: bool = config.USE_COLOR
    clear_screen: bool = config.CLEAR_SCREEN
    spinner: bool = config.AI_THINKING_SPINNER
    think_delay_sec: float = config.AI_THINK_DELAY_SEC
    beeps: int = config.BEEP_COUNT

    def render(self, board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
        if self.clear_screen:
            print(CLEAR, end="")

        print(style("CONNECT 4", BOLD, self.use_color))
        if status:
            print(style(status, FG_CYAN, self.use_color))
        else:
            print()

        for line in board_lines(board, highlight, self.use_color):
            print(line)

    def announce(self, message: str) -> None:
        print(message)

    def thinking(self, label: str) -> None:
        ai_thinking(label, self.think_delay_sec, self.spinner)

    def alert(self) -> None:
        beep(self.beeps)
