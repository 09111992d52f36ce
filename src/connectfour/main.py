from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from connectfour import config
from connectfour.ai.rng import seed_process_rng
from connectfour.ai.tactical_agent import TacticalAgent
from connectfour.game.controller import GameController
from connectfour.ui.human import ConsoleInput
from connectfour.ui.render import ConsoleOutput

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="connectfour",
        description="Connect Four in the terminal: you (X) against a tactical computer player (O).",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed the computer's random moves (default: clock).")
    p.add_argument("--no-color", action="store_true", help="Plain text board, no ANSI colors.")
    p.add_argument("--no-clear", action="store_true", help="Don't clear the screen between frames.")
    p.add_argument("--no-spinner", action="store_true", help="Skip the 'thinking' pause before computer moves.")
    p.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level on stderr (default: {config.LOG_LEVEL}).",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT, stream=sys.stderr)

    rng = seed_process_rng(args.seed)
    out = ConsoleOutput(
        use_color=config.USE_COLOR and not args.no_color,
        clear_screen=config.CLEAR_SCREEN and not args.no_clear,
        think_delay_sec=0.0 if args.no_spinner else config.AI_THINK_DELAY_SEC,
    )
    logger.info("session started (seed=%s)", args.seed)
    controller = GameController(ConsoleInput(), out, TacticalAgent(rng=rng))

    try:
        finished = controller.run()
    except KeyboardInterrupt:
        print()
        return 130

    print(f"\nThanks for playing ({finished} game(s) finished).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
