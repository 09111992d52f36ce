from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Optional

from connectfour.ai.fallback import probe_column
from connectfour.ai.rng import process_rng
from connectfour.core.board import Board
from connectfour.core.errors import IllegalMoveError
from connectfour.game.state import GameState
from connectfour.types import Move, Player, other

logger = logging.getLogger(__name__)


@dataclass
class TacticalAgent:
    """
    Cheap rule-based opponent:
      1) Play an immediate winning move if one exists
      2) Otherwise take the first column where the opponent would win next
      3) Otherwise a random start column, probed rightward until playable

    The block scan stops at the first threat it finds and never checks whether
    blocking there hands the opponent a different line. That weakness is part
    of how this opponent plays.
    """
    name: str = "Tactical"
    rng: random.Random = field(default_factory=process_rng)
    last_info: dict = field(default_factory=dict)

    def _winning_column(self, board: Board, player: Player) -> tuple[Optional[Move], int]:
        nodes = 0
        for c in range(board.cols):
            if not board.can_play(c):
                continue
            b2 = board.copy()
            b2.apply_move(player, c)
            nodes += 1
            if b2.check_win(player):
                return Move(c), nodes
        return None, nodes

    def select_column(self, board: Board, me: Player, opponent: Player) -> Move:
        if board.is_full():
            raise IllegalMoveError("No valid moves.")

        t0 = time.perf_counter()

        # 1) win now
        m, nodes = self._winning_column(board, me)
        reason = "win"

        # 2) block opponent win
        if m is None:
            m, n = self._winning_column(board, opponent)
            nodes += n
            reason = "block"

        # 3) random fallback
        if m is None:
            m = probe_column(board, self.rng)
            reason = "random"

        self.last_info = {
            "reason": reason,
            "column": int(m),
            "nodes": nodes,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        logger.debug("%s picked col=%d (%s, %d nodes)", self.name, int(m), reason, nodes)
        return m

    def choose_move(self, state: GameState) -> Move:
        return self.select_column(state.board, state.current, other(state.current))
