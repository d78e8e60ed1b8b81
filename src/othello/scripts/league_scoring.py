"""
League measures for Othello teams.

Results alone are coarse: a 33-31 win and a 64-0 wipe-out both count as one
win. The rating blends the result rate with the share of the final discs a
team owned, so teams that win big (or lose narrowly) separate from teams
that scrape by. Ties in rating go to the team that was shut out of moves
less often.
"""

from __future__ import annotations

from typing import Tuple

from othello.config import LEAGUE_DISC_WEIGHT

from .league_types import Tally


def score_rate(t: Tally) -> float:
    """Wins plus half draws, per game."""
    return (t.wins + 0.5 * t.draws) / t.games if t.games else 0.0


def disc_share(t: Tally) -> float:
    total = t.discs_for + t.discs_against
    return t.discs_for / total if total else 0.5


def avg_disc_margin(t: Tally) -> float:
    return (t.discs_for - t.discs_against) / t.games if t.games else 0.0


def pass_rate(t: Tally) -> float:
    """Fraction of the team's turns on which it had no legal move."""
    turns = t.moves + t.passes
    return t.passes / turns if turns else 0.0


def flips_per_move(t: Tally) -> float:
    return t.flips / t.moves if t.moves else 0.0


def ms_per_move(t: Tally) -> float:
    return t.time_ms / t.moves if t.moves else 0.0


def nodes_per_move(t: Tally) -> float:
    return t.nodes / t.moves if t.moves else 0.0


def avg_depth(t: Tally) -> float:
    return t.depth_sum / t.moves if t.moves else 0.0


def rating(t: Tally, disc_weight: float = LEAGUE_DISC_WEIGHT) -> float:
    if not 0.0 <= disc_weight <= 1.0:
        raise ValueError("disc_weight must be within [0, 1].")
    if not t.games:
        return 0.0
    return (1.0 - disc_weight) * score_rate(t) + disc_weight * disc_share(t)


def rank_key(name: str, t: Tally, disc_weight: float = LEAGUE_DISC_WEIGHT) -> Tuple[float, float, str]:
    return (-rating(t, disc_weight), pass_rate(t), name)
