# src/connect4cli/config.py

from __future__ import annotations

import os

ROWS = 6
COLS = 7
CONNECT_N = 4
CENTER_COL = COLS // 2

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True
CONSOLE_WIDTH_FALLBACK = 80

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so AI moves aren’t instant

# Hard AI lookahead (plies). Deeper searches are not supported.
SEARCH_DEPTH = 5
MAX_SEARCH_DEPTH = 5

# Medium AI: chance of taking the best strategic column
STRATEGIC_MOVE_CHANCE = 0.70
CENTER_PREFERENCE = (3, 2, 4, 1, 5, 0, 6)

# Persistent win/loss counters
STATS_PATH = os.environ.get("CONNECT4_STATS_FILE", "connect4_stats.csv")

LOG_LEVEL = os.environ.get("CONNECT4_LOG_LEVEL", "WARNING").upper()
