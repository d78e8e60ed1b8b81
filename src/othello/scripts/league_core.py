from __future__ import annotations

import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional

from othello.config import BOARD_SIZE, LEAGUE_DISC_WEIGHT

from .league_format import A, Col, hr, print_table, term_width
from .league_play import apply_record, chunked, run_pairings_batch
from .league_scoring import (
    avg_depth,
    avg_disc_margin,
    disc_share,
    flips_per_move,
    ms_per_move,
    nodes_per_move,
    pass_rate,
    rank_key,
    rating,
    score_rate,
)
from .league_types import Tally, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "rating", "score_rate", "disc_share", "avg_disc_margin",
    "pass_rate", "flips_per_move",
    "ms_per_move", "nodes_per_move", "avg_depth",
    "moves", "passes",
]


def schedule_round_robin(teams: List[Team], seed: int) -> list:
    items = []
    n = len(teams)
    for i in range(n):
        for j in range(i + 1, n):
            a, b = teams[i], teams[j]
            base_seed = seed + i * 10_000 + j * 100
            items.append((a.name, b.name, a.make, b.make, base_seed))
    return items


def run_league(
    teams: List[Team],
    games_per_pair: int = 2,
    seed: int = 1234,
    size: int = BOARD_SIZE,
    opening_plies: int = 2,
    max_workers: Optional[int] = None,
    batch_pairings: int = 8,
) -> Dict[str, Tally]:
    """
    Full round-robin: every pair of teams plays games_per_pair games,
    swapping colors each game. max_workers=1 runs in-process.
    """
    if len(teams) < 2:
        raise ValueError("A league needs at least two teams.")
    if len({t.name for t in teams}) != len(teams):
        raise ValueError("Team names must be unique.")

    tally: Dict[str, Tally] = {t.name: Tally() for t in teams}
    items = schedule_round_robin(teams, seed)
    batches = [(chunk, games_per_pair, size, opening_plies) for chunk in chunked(items, batch_pairings)]

    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    logger.info("league: %d teams, %d pairings, %d batches, workers=%d",
                len(teams), len(items), len(batches), max_workers)

    if max_workers <= 1:
        for batch in batches:
            for record in run_pairings_batch(batch):
                apply_record(tally, record)
        return tally

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        futures = [ex.submit(run_pairings_batch, batch) for batch in batches]
        for fut in as_completed(futures):
            for record in fut.result():
                apply_record(tally, record)

    return tally


def standings(tally: Dict[str, Tally], disc_weight: float = LEAGUE_DISC_WEIGHT) -> List[dict]:
    """One row per team, best first: rating, then fewer passes, then name."""
    ordered = sorted(tally.items(), key=lambda kv: rank_key(kv[0], kv[1], disc_weight))
    rows = []
    for name, t in ordered:
        rows.append({
            "name": name,
            "games": t.games, "wins": t.wins, "draws": t.draws, "losses": t.losses,
            "rating": round(rating(t, disc_weight), 6),
            "score_rate": round(score_rate(t), 6),
            "disc_share": round(disc_share(t), 6),
            "avg_disc_margin": round(avg_disc_margin(t), 3),
            "pass_rate": round(pass_rate(t), 6),
            "flips_per_move": round(flips_per_move(t), 3),
            "ms_per_move": round(ms_per_move(t), 3),
            "nodes_per_move": round(nodes_per_move(t), 1),
            "avg_depth": round(avg_depth(t), 3),
            "moves": t.moves, "passes": t.passes,
        })
    return rows


def print_standings(rows: List[dict], title: str = "League standings") -> None:
    w = term_width(100)
    fixed = 3 + 2 + 7 + 2 + 6 + 2 + 6 + 2 + 7 + 2 + 6 + 2 + 6 + 2 + 7 + 2 + 8
    agent_w = max(18, min(40, w - fixed))

    cols = [
        Col("rk", 3, "right"),
        Col("agent", agent_w, "left"),
        Col("rating", 7, "right"),
        Col("score", 6, "right"),
        Col("discs", 6, "right"),
        Col("margin", 7, "right"),
        Col("pass%", 6, "right"),
        Col("flp/mv", 6, "right"),
        Col("ms/mv", 7, "right"),
        Col("W-D-L", 8, "right"),
    ]

    out = []
    for i, r in enumerate(rows, start=1):
        m_txt = f"{r['avg_disc_margin']:+0.1f}"
        if r["avg_disc_margin"] > 0:
            m_txt = A.green(m_txt)
        elif r["avg_disc_margin"] < 0:
            m_txt = A.red(m_txt)
        out.append([
            str(i),
            r["name"],
            f"{r['rating']:0.4f}",
            f"{r['score_rate']:0.3f}",
            f"{100 * r['disc_share']:0.1f}%",
            m_txt,
            f"{100 * r['pass_rate']:0.1f}",
            f"{r['flips_per_move']:0.2f}",
            f"{r['ms_per_move']:0.1f}",
            f"{r['wins']}-{r['draws']}-{r['losses']}",
        ])

    print("\n" + A.bold(f"=== {title} ==="))
    print(A.dim(hr("═", w)))
    print_table("Ranked by rating (result rate blended with disc share)", cols, out, width=w)


def export_csv(rows: List[dict], outdir: Path) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = outdir / f"league_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    logger.info("wrote %d rows to %s", len(rows), out_path)
    return out_path
