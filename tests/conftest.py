from __future__ import annotations

from typing import Iterable, List, Optional

import pytest

from connectfour.ai import rng as rng_module
from connectfour.core.board import Board
from connectfour.core.errors import InputExhausted
from connectfour.game.state import GameState
from connectfour.types import Move


def draw_pattern(row: int, col: int) -> str:
    """Token of a full board with no four-in-a-row anywhere."""
    return "X" if (row + col // 2) % 2 == 0 else "O"


def drawn_board(leave_empty: Iterable[int] = ()) -> Board:
    """Fill the board with draw_pattern, leaving the top cell of some columns empty."""
    b = Board()
    empty = set(leave_empty)
    for r in range(b.rows):
        for c in range(b.cols):
            if r == b.rows - 1 and c in empty:
                continue
            b.grid[r][c] = draw_pattern(r, c)
    return b


class FakeInput:
    def __init__(self, columns: Iterable[Optional[int]] = (), acks: int = 0) -> None:
        self.columns: List[Optional[int]] = list(columns)
        self.acks = acks
        self.requests = 0

    def request_column(self) -> Optional[Move]:
        self.requests += 1
        if not self.columns:
            raise InputExhausted("script finished")
        col = self.columns.pop(0)
        return None if col is None else Move(col)

    def wait_for_ack(self) -> None:
        if self.acks <= 0:
            raise InputExhausted("no ack left")
        self.acks -= 1


class FakeOutput:
    def __init__(self) -> None:
        self.frames: list = []
        self.messages: List[str] = []
        self.thinking_labels: List[str] = []
        self.alerts = 0

    def render(self, board, status="", highlight=None) -> None:
        self.frames.append((board.copy(), status, list(highlight) if highlight else None))

    def announce(self, message: str) -> None:
        self.messages.append(message)

    def thinking(self, label: str) -> None:
        self.thinking_labels.append(label)

    def alert(self) -> None:
        self.alerts += 1


class ScriptedSelector:
    name = "Scripted"

    def __init__(self, columns: Iterable[int]) -> None:
        self.columns = list(columns)

    def select_column(self, board, me, opponent) -> Move:
        return Move(self.columns.pop(0))

    def choose_move(self, state: GameState) -> Move:
        return self.select_column(state.board, state.current, "X")


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def out() -> FakeOutput:
    return FakeOutput()


@pytest.fixture(autouse=True)
def fresh_process_rng(monkeypatch):
    monkeypatch.setattr(rng_module, "_rng", None)
