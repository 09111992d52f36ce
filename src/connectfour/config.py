# src/connectfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles (the CLI can switch these off per run)
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # short pause so AI moves aren’t instant

# Beeps played when the human loses
BEEP_COUNT = 4

# Logging goes to stderr; keep it quiet by default so it doesn't fight the board
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
