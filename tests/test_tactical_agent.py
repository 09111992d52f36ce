from __future__ import annotations

import random

import pytest

from connectfour.ai.fallback import probe_column
from connectfour.ai.tactical_agent import TacticalAgent
from connectfour.core.board import Board
from connectfour.core.errors import IllegalMoveError
from connectfour.game.state import GameState

from conftest import drawn_board


class FixedRandom:
    """randint always returns the same start column."""

    def __init__(self, value: int) -> None:
        self.value = value

    def randint(self, a: int, b: int) -> int:
        assert (a, b) == (1, 7)
        return self.value


def agent(start: int = 1) -> TacticalAgent:
    return TacticalAgent(rng=FixedRandom(start))


def test_takes_the_winning_column_first(board):
    # O completes the bottom row by playing column 3
    for c in range(3):
        board.apply_move("O", c)
    # X threatens column 5 vertically, which must not take priority
    for _ in range(3):
        board.apply_move("X", 5)

    a = agent(start=7)
    assert a.select_column(board, "O", "X") == 3
    assert a.last_info["reason"] == "win"


def test_blocks_the_opponent(board):
    # X on columns 3,4,5: playing 2 (or 6) would win for X
    for c in (3, 4, 5):
        board.apply_move("X", c)
    board.apply_move("O", 3)
    board.apply_move("O", 4)

    a = agent(start=1)
    assert a.select_column(board, "O", "X") == 2
    assert a.last_info["reason"] == "block"


def test_block_takes_the_first_threat_only(board):
    # Threats in column 1 (vertical) and column 4 (vertical); lowest wins
    for _ in range(3):
        board.apply_move("X", 4)
        board.apply_move("X", 1)
    assert agent().select_column(board, "O", "X") == 1


def test_win_beats_block(board):
    for _ in range(3):
        board.apply_move("X", 0)
        board.apply_move("O", 6)
    assert agent().select_column(board, "O", "X") == 6


def test_selector_leaves_board_untouched(board):
    for c in (0, 1, 2):
        board.apply_move("X", c)
    before = board.copy()
    agent().select_column(board, "O", "X")
    assert board == before


def test_fallback_uses_random_start_column(board):
    a = agent(start=4)
    assert a.select_column(board, "O", "X") == 3
    assert a.last_info["reason"] == "random"


def test_fallback_probe_wraps_around(board):
    # fill column 6 without making a line
    for i in range(6):
        board.apply_move("X" if i % 2 == 0 else "O", 6)
    assert probe_column(board, FixedRandom(7)) == 0


def test_fallback_probe_skips_full_columns():
    b = drawn_board(leave_empty=[1])
    assert probe_column(b, FixedRandom(3)) == 1


def test_fallback_always_lands_on_a_playable_column(board):
    rng = random.Random(1234)
    for i in range(4):
        board.apply_move("X" if i % 2 == 0 else "O", 2)
    board.apply_move("X", 2)
    board.apply_move("O", 2)
    for _ in range(50):
        col = probe_column(board, rng)
        assert board.can_play(col)
        assert col != 2


def test_same_seed_same_choices():
    a = TacticalAgent(rng=random.Random(99))
    b = TacticalAgent(rng=random.Random(99))
    assert [a.select_column(Board(), "O", "X") for _ in range(10)] == [
        b.select_column(Board(), "O", "X") for _ in range(10)
    ]


def test_full_board_has_no_move():
    with pytest.raises(IllegalMoveError):
        agent().select_column(drawn_board(), "O", "X")


def test_choose_move_plays_for_the_side_to_move(board):
    for c in range(3):
        board.apply_move("O", c)
    state = GameState(board=board, current="O")
    assert agent(start=7).choose_move(state) == 3
