from __future__ import annotations
from typing import Optional, Protocol

from othello.core.board import Board
from othello.types import Color, Move


class Agent(Protocol):
    name: str
    color: Optional[Color]

    def set_color(self, color: Color) -> None:
        ...

    def propose_move(self, board: Board, color: Optional[Color] = None) -> Optional[Move]:
        """Return a legal move for `color`, or None to pass."""
        ...


def resolve_color(agent: Agent, color: Optional[Color]) -> Color:
    side = color if color is not None else agent.color
    if side is None:
        raise ValueError(f"{agent.name}: no color configured; call set_color() first.")
    return side
