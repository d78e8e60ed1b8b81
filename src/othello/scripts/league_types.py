from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from othello.ai.base import Agent


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[], Agent]  # must pickle for worker processes: functools.partial, not a lambda


@dataclass
class Tally:
    """A team's league totals, always counted from its own side of the board."""
    games: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0

    discs_for: int = 0
    discs_against: int = 0

    moves: int = 0
    passes: int = 0
    flips: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth_sum: int = 0

    def record_game(self, own: int, opp: int, side: Dict[str, int]) -> None:
        # Othello has no resignation: the disc count decides the game
        self.games += 1
        if own > opp:
            self.wins += 1
        elif own < opp:
            self.losses += 1
        else:
            self.draws += 1

        self.discs_for += own
        self.discs_against += opp

        self.moves += side["moves"]
        self.passes += side["passes"]
        self.flips += side["flips"]
        self.time_ms += side["time_ms"]
        self.nodes += side["nodes"]
        self.depth_sum += side["depth"]
