# src/tictactoe/config.py

from __future__ import annotations

BOARD_SIZE = 3

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Logging goes to stderr; board output stays on stdout
LOG_LEVEL = "WARNING"
LOG_FORMAT = "simple"
