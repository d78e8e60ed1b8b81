from __future__ import annotations

from typing import Dict, List, Tuple

from othello.game.controller import play_game
from othello.types import BLACK, WHITE

from .league_types import Tally

# (a_name, b_name, a_is_black, black_discs, white_discs, per-color stats)
GameRecord = Tuple[str, str, bool, int, int, Dict[str, Dict[str, int]]]


def apply_record(tally: Dict[str, Tally], record: GameRecord) -> None:
    a_name, b_name, a_is_black, black, white, stats = record
    discs = {BLACK: black, WHITE: white}
    a_side, b_side = (BLACK, WHITE) if a_is_black else (WHITE, BLACK)

    tally[a_name].record_game(discs[a_side], discs[b_side], stats[a_side])
    tally[b_name].record_game(discs[b_side], discs[a_side], stats[b_side])


def run_pairings_batch(args) -> List[GameRecord]:
    """Play every game of a batch of pairings; colors alternate per game."""
    (batch_items, games_per_pair, size, opening_plies) = args
    out: List[GameRecord] = []
    for (a_name, b_name, a_make, b_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            a_is_black = g % 2 == 0
            a, b = a_make(), b_make()
            black, white = (a, b) if a_is_black else (b, a)
            res = play_game(black, white, size=size, opening_plies=opening_plies, seed=base_seed + g)
            out.append((a_name, b_name, a_is_black, res.black, res.white, res.stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
