from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional

from othello.core.board import Board
from othello.types import BLACK, WHITE, Color


def empty_stats() -> Dict[str, Dict[str, int]]:
    return {
        BLACK: {"moves": 0, "passes": 0, "flips": 0, "time_ms": 0, "nodes": 0, "depth": 0},
        WHITE: {"moves": 0, "passes": 0, "flips": 0, "time_ms": 0, "nodes": 0, "depth": 0},
    }


@dataclass(slots=True)
class GameResult:
    board: Board
    winner: Optional[Color]  # None = draw
    black: int
    white: int
    plies: int
    stats: Dict[str, Dict[str, int]] = field(default_factory=empty_stats)

    @property
    def margin(self) -> int:
        """Black disks minus white disks."""
        return self.black - self.white

    @property
    def outcome(self) -> str:
        return self.winner if self.winner is not None else "D"
