from __future__ import annotations

import time
from dataclasses import dataclass, field
from math import inf
from typing import Optional

from othello.ai.base import resolve_color
from othello.ai.search import SearchEngine
from othello.config import DEFAULT_HEURISTIC, MINIMAX_DEPTH
from othello.core.board import Board
from othello.core.scoring import get_heuristic
from othello.types import Color, Move


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    color: Optional[Color] = None
    depth: int = MINIMAX_DEPTH
    heuristic: str = DEFAULT_HEURISTIC
    prune: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)

    _engine: SearchEngine = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("Minimax depth must be at least 1.")
        self._engine = SearchEngine(heuristic=get_heuristic(self.heuristic), prune=self.prune)

    def set_color(self, color: Color) -> None:
        self.color = color

    def propose_move(self, board: Board, color: Optional[Color] = None) -> Optional[Move]:
        me = resolve_color(self, color)

        if not board.legal_moves(me):
            self.last_info = {}
            return None

        start = time.perf_counter()
        value, move = self._engine.search(board, self.depth, -inf, inf, me, me)
        elapsed = time.perf_counter() - start

        stats = self._engine.stats
        self.last_info = {
            "depth": self.depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": value,
            "move": (move.position.x, move.position.y) if move else None,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return move


@dataclass(slots=True)
class MaxmaxAgent(MinimaxAgent):
    """Minimax driven by the mobility heuristic instead of disk count."""
    name: str = "Maxmax AI"
    heuristic: str = "mobility"
