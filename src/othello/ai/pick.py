from __future__ import annotations

from typing import Callable, Dict

from othello.ai.base import Agent
from othello.ai.greedy_agent import GreedyAgent, WorstAgent
from othello.ai.minimax_agent import MaxmaxAgent, MinimaxAgent
from othello.ai.random_agent import RandomAgent

_FACTORIES: Dict[str, Callable[..., Agent]] = {
    "random": RandomAgent,
    "greedy": GreedyAgent,
    "worst": WorstAgent,
    "minimax": MinimaxAgent,
    "maxmax": MaxmaxAgent,
}


def make_agent(kind: str, **kwargs) -> Agent:
    try:
        factory = _FACTORIES[kind]
    except KeyError:
        raise ValueError(f"Unknown strategy {kind!r}. Choose from: {', '.join(_FACTORIES)}.") from None
    return factory(**kwargs)


def parse_agent_spec(spec: str) -> Agent:
    """
    Build an agent from a short CLI spec:
      random[:seed]
      greedy | worst
      minimax[:depth[:heuristic]]
      maxmax[:depth]
    The lowercased string becomes the agent's name.
    """
    name = spec.strip().lower()
    kind, *args = [p.strip() for p in name.split(":")]
    kwargs: dict = {"name": name}

    if kind == "random":
        if len(args) > 1:
            raise ValueError("random takes at most one argument (seed).")
        if args:
            kwargs["seed"] = int(args[0])

    elif kind in ("greedy", "worst"):
        if args:
            raise ValueError(f"{kind} takes no arguments.")

    elif kind == "minimax":
        if len(args) > 2:
            raise ValueError("minimax takes at most depth and heuristic.")
        if args:
            kwargs["depth"] = int(args[0])
        if len(args) > 1:
            kwargs["heuristic"] = args[1]

    elif kind == "maxmax":
        if len(args) > 1:
            raise ValueError("maxmax takes at most one argument (depth).")
        if args:
            kwargs["depth"] = int(args[0])

    return make_agent(kind, **kwargs)
