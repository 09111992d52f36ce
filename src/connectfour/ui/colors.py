from __future__ import annotations

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; used for the last move and winning line

FG_RED = "\033[31m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

CLEAR = "\033[2J\033[H"  # clear screen, cursor to top-left


def style(s: str, code: str, enabled: bool = True) -> str:
    if not enabled:
        return s
    return f"{code}{s}{RESET}"
