# src/othello/config.py

from __future__ import annotations

import os

BOARD_SIZE = 8

# Search defaults
MINIMAX_DEPTH = 4
DEFAULT_HEURISTIC = "disk"  # "disk" | "mobility"

# League
LEAGUE_DISC_WEIGHT = 0.5  # share of the rating taken from disc ownership rather than results
RESULTS_DIR = "data/results"
RESULTS_PATTERN = "league_results_*.csv"

# Logging
LOG_LEVEL = os.environ.get("OTHELLO_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
