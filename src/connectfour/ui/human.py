from __future__ import annotations
import logging
from typing import Callable, Optional

from connectfour.config import COLS
from connectfour.core.errors import InputExhausted
from connectfour.types import Move
from connectfour.ui.prompts import parse_column

logger = logging.getLogger(__name__)


class ConsoleInput:
    """Reads Player 1's columns from the terminal."""

    def __init__(self, cols: int = COLS, read: Optional[Callable[[str], str]] = None) -> None:
        self.cols = cols
        self.read = read if read is not None else input

    def _readline(self, prompt: str) -> str:
        try:
            return self.read(prompt)
        except EOFError as e:
            raise InputExhausted("End of input.") from e

    def request_column(self) -> Optional[Move]:
        raw = self._readline(f"\nEnter a column between 1 and {self.cols}.  ")
        try:
            return parse_column(raw, self.cols)
        except ValueError as e:
            logger.debug("rejected input %r", raw)
            print(e)
            return None

    def wait_for_ack(self) -> None:
        self._readline("")
