from __future__ import annotations


class BoardError(ValueError):
    """Base class for invalid board operations."""


class RangeError(BoardError):
    """Row or column index outside the board."""


class IllegalMoveError(BoardError):
    """Move into a column that is already full."""


class InputExhausted(EOFError):
    """
    The human input channel is closed (end of input, or the player quit).
    Not a game error: it ends the session.
    """
