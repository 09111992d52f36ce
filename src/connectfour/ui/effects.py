from __future__ import annotations
import itertools
import sys
import time

from connectfour.config import AI_THINK_DELAY_SEC, BEEP_COUNT

SPINNER_FRAMES = "|/-\\"
FRAME_SEC = 0.08
ERASE_LINE = "\r\033[2K"


def ai_thinking(label: str = "AI is thinking", delay_sec: float = AI_THINK_DELAY_SEC, spinner: bool = True) -> None:
    """Pause before the computer moves, optionally spinning next to `label`."""
    if delay_sec <= 0:
        return

    if not spinner:
        time.sleep(delay_sec)
        return

    ticks = max(1, round(delay_sec / FRAME_SEC))
    for frame in itertools.islice(itertools.cycle(SPINNER_FRAMES), ticks):
        sys.stdout.write(f"\r{label}... {frame}")
        sys.stdout.flush()
        time.sleep(FRAME_SEC)
    sys.stdout.write(ERASE_LINE)
    sys.stdout.flush()


def beep(count: int = BEEP_COUNT) -> None:
    # flush right away so the bell isn't held back by buffering
    sys.stdout.write("\a" * count)
    sys.stdout.flush()
