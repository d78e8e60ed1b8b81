from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from othello.ai.base import resolve_color
from othello.core.board import Board
from othello.types import Color, Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    color: Optional[Color] = None
    seed: Optional[int] = None
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.seed is not None:
            self.rng.seed(self.seed)

    def set_color(self, color: Color) -> None:
        self.color = color

    def propose_move(self, board: Board, color: Optional[Color] = None) -> Optional[Move]:
        side = resolve_color(self, color)
        moves = board.legal_moves(side)
        if not moves:
            self.last_info = {}
            return None
        move = self.rng.choice(moves)
        self.last_info = {"depth": 0, "nodes": 0, "candidates": len(moves)}
        return move
