from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from connectfour.ai.base import MoveSelector
from connectfour.core.board import Board
from connectfour.core.errors import BoardError, InputExhausted
from connectfour.game.actions import apply_move
from connectfour.game.results import TurnResult, Win, is_terminal
from connectfour.game.state import GameState
from connectfour.types import Coord, Move, PLAYER1, PLAYER2, player_label

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    def request_column(self) -> Optional[Move]:
        ...

    def wait_for_ack(self) -> None:
        ...


class OutputSink(Protocol):
    def render(self, board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
        ...

    def announce(self, message: str) -> None:
        ...

    def thinking(self, label: str) -> None:
        ...

    def alert(self) -> None:
        ...


class GameController:
    """
    Human (Player 1) against a move selector (Player 2).

    One turn is a human move followed, unless the game ended, by the
    selector's move. Game over comes back as a TurnResult; the session loop
    resets the board and starts again until the input runs out.
    """

    def __init__(
        self,
        inp: InputSource,
        out: OutputSink,
        selector: MoveSelector,
        state: Optional[GameState] = None,
    ) -> None:
        self.inp = inp
        self.out = out
        self.selector = selector
        self.state = state if state is not None else GameState()

    def play_human_turn(self) -> TurnResult:
        if self.state.current != PLAYER1:
            raise RuntimeError("Not the human's turn.")

        while True:
            move = self.inp.request_column()
            if move is None:
                continue
            try:
                result = apply_move(self.state, move)
            except BoardError as e:
                # bad column: report and ask again, the turn is not used up
                self.out.announce(str(e))
                continue

            self.state.last_status = f"Player 1 chose {int(move) + 1}"
            return result

    def play_ai_turn(self) -> TurnResult:
        if self.state.current != PLAYER2:
            raise RuntimeError("Not the computer's turn.")

        self.out.thinking(self.selector.name)
        move = self.selector.choose_move(self.state)
        result = apply_move(self.state, move)
        self.state.last_status = f"{self.selector.name} chose {int(move) + 1}"
        return result

    def play_turn(self) -> TurnResult:
        result = self.play_human_turn()
        if is_terminal(result):
            return result

        self.out.render(self.state.board, self.state.last_status)
        return self.play_ai_turn()

    def _finish(self, result: TurnResult) -> None:
        board = self.state.board
        self.state.terminal = True
        highlight = None

        if isinstance(result, Win):
            self.state.winner = result.player
            highlight = board.winning_line(result.player)
            message = f"{player_label(result.player)} wins!"
        else:
            message = "It's a draw!"

        self.state.last_status = message
        logger.info("game over: %s", message)
        self.out.render(board, message, highlight=highlight)

        if isinstance(result, Win) and result.player == PLAYER2:
            self.out.alert()

    def play_game(self) -> TurnResult:
        logger.info("new game: Player 1 vs %s", self.selector.name)
        self.out.render(self.state.board, self.state.last_status)

        while True:
            result = self.play_turn()
            if is_terminal(result):
                break
            self.out.render(self.state.board, self.state.last_status)

        self._finish(result)
        return result

    def run(self) -> int:
        """
        Play games back to back until the input is exhausted.
        Returns the number of games that reached a result.
        """
        finished = 0
        try:
            while True:
                self.play_game()
                finished += 1
                self.out.announce("Press Enter to play again.")
                self.inp.wait_for_ack()
                self.state.reset()
        except InputExhausted:
            logger.info("input closed after %d finished game(s)", finished)
        return finished
