# src/othello/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

Color = Literal["B", "W"]
Cell = Optional[Color]

BLACK: Color = "B"
WHITE: Color = "W"


def other(color: Color) -> Color:
    return WHITE if color == BLACK else BLACK


@dataclass(frozen=True, slots=True)
class Position:
    x: int  # column
    y: int  # row


@dataclass(frozen=True, slots=True)
class Move:
    position: Position
    flips: Tuple[Position, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "flips", tuple(self.flips))
        if self.position in self.flips:
            raise ValueError("A move cannot flip its own target cell.")
        if len(set(self.flips)) != len(self.flips):
            raise ValueError("Flip set contains a duplicate position.")

    def __contains__(self, pos: object) -> bool:
        return pos in self.flips
