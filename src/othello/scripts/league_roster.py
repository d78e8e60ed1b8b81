from __future__ import annotations

from functools import partial
from typing import List

from othello.ai.greedy_agent import GreedyAgent, WorstAgent
from othello.ai.minimax_agent import MaxmaxAgent, MinimaxAgent
from othello.ai.random_agent import RandomAgent

from .league_types import Team


def _team(cls, *, name: str, **kwargs) -> Team:
    return Team(name, partial(cls, name=name, **kwargs))


def build_roster(max_depth: int = 3) -> List[Team]:
    if max_depth < 1:
        raise ValueError("max_depth must be >= 1.")

    teams: List[Team] = []

    for seed in [0, 1]:
        teams.append(_team(RandomAgent, name=f"Random seed{seed}", seed=seed))

    teams.append(_team(GreedyAgent, name="Greedy"))
    teams.append(_team(WorstAgent, name="Worst"))

    for d in range(1, max_depth + 1):
        teams.append(_team(MinimaxAgent, name=f"Minimax d{d} disk", depth=d, heuristic="disk"))
        teams.append(_team(MaxmaxAgent, name=f"Maxmax d{d}", depth=d))

    return teams
