from __future__ import annotations
from typing import Callable, Dict, Optional

from othello.core.board import Board
from othello.types import BLACK, Color

Heuristic = Callable[[Board, Color, Optional[Color]], int]


def disk_difference(board: Board, perspective: Color, mover: Optional[Color] = None) -> int:
    white, black = board.score()
    return black - white if perspective == BLACK else white - black


def mobility(board: Board, perspective: Color, mover: Optional[Color] = None) -> int:
    """
    Mobility of the side to move, signed from the perspective player's view:
    positive when it is the perspective player's turn, negative otherwise.
    """
    side = perspective if mover is None else mover
    count = len(board.legal_moves(side))
    return count if side == perspective else -count


HEURISTICS: Dict[str, Heuristic] = {
    "disk": disk_difference,
    "mobility": mobility,
}


def get_heuristic(kind: str) -> Heuristic:
    try:
        return HEURISTICS[kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic {kind!r}. Choose from: {', '.join(HEURISTICS)}.") from None
