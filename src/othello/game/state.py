from __future__ import annotations
from dataclasses import dataclass

from othello.core.board import Board
from othello.types import BLACK, Color


@dataclass(slots=True)
class GameState:
    board: Board
    current: Color = BLACK
    passes: int = 0  # consecutive
    plies: int = 0
