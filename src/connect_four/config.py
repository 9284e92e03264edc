# src/connect_four/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
DISPLAY_TOKEN = "O"

# Seat defaults for the console game: (colour name, token)
SEATS = (("red", "1"), ("yellow", "2"))

# Logging
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
