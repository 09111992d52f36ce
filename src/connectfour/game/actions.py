from __future__ import annotations
import logging

from connectfour.game.results import TurnResult, outcome_after
from connectfour.game.state import GameState
from connectfour.types import Move, other

logger = logging.getLogger(__name__)


def apply_move(state: GameState, move: Move) -> TurnResult:
    """
    Play `move` for the player to move, then hand the turn over.
    Board errors propagate before anything changes.
    """
    mover = state.current
    state.board.apply_move(mover, move)
    result = outcome_after(state.board, mover)
    logger.debug("%s played col=%d -> %s", mover, int(move), result)
    state.current = other(mover)
    return result
