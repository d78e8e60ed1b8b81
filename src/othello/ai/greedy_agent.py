from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

from othello.ai.base import resolve_color
from othello.core.board import Board
from othello.types import Color, Move


def _pick_by_flips(moves: List[Move], largest: bool) -> Move:
    """First move in scan order with the most (or fewest) flips."""
    best = moves[0]
    for m in moves[1:]:
        n = len(m.flips)
        if (largest and n > len(best.flips)) or (not largest and n < len(best.flips)):
            best = m
    return best


@dataclass(slots=True)
class GreedyAgent:
    """
    Plays whichever move flips the most disks right now.
    No lookahead; ties go to the first move in scan order.
    """
    name: str = "Greedy (max flips)"
    color: Optional[Color] = None
    largest: bool = True

    last_info: dict = field(default_factory=dict)

    def set_color(self, color: Color) -> None:
        self.color = color

    def propose_move(self, board: Board, color: Optional[Color] = None) -> Optional[Move]:
        side = resolve_color(self, color)

        start = time.perf_counter()
        moves = board.legal_moves(side)
        if not moves:
            self.last_info = {}
            return None

        choice = _pick_by_flips(moves, self.largest)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 1,
            "nodes": len(moves),
            "eval": len(choice.flips),
            "move": (choice.position.x, choice.position.y),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return choice


@dataclass(slots=True)
class WorstAgent(GreedyAgent):
    """Mirror of GreedyAgent: always flips as few disks as it can."""
    name: str = "Worst (min flips)"
    largest: bool = False
