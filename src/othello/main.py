from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from othello.ai.pick import parse_agent_spec
from othello.config import BOARD_SIZE, LOG_LEVEL, RESULTS_DIR
from othello.game.controller import play_game
from othello.log import configure_logging
from othello.scripts.league_core import export_csv, print_standings, run_league, standings
from othello.scripts.league_roster import build_roster
from othello.types import BLACK

STRATEGY_HELP = "random[:seed] | greedy | worst | minimax[:depth[:disk|mobility]] | maxmax[:depth]"


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="othello", description="Othello strategies: single games and leagues.")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    sub = ap.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play one game between two strategies.")
    play.add_argument("--black", default="minimax:3", help=STRATEGY_HELP)
    play.add_argument("--white", default="greedy", help=STRATEGY_HELP)
    play.add_argument("--size", type=int, default=BOARD_SIZE, help="Board side length (even).")
    play.add_argument("--opening-plies", type=int, default=0, help="Random plies before the agents take over.")
    play.add_argument("--seed", type=int, default=None, help="Seed for the random opening.")

    league = sub.add_parser("league", help="Round-robin league over the built-in roster.")
    league.add_argument("--games-per-pair", type=int, default=2)
    league.add_argument("--max-depth", type=int, default=3, help="Deepest minimax team in the roster.")
    league.add_argument("--size", type=int, default=BOARD_SIZE)
    league.add_argument("--opening-plies", type=int, default=2)
    league.add_argument("--seed", type=int, default=1234)
    league.add_argument("--workers", type=int, default=None, help="Process workers (1 = in-process).")
    league.add_argument("--out", type=str, default=RESULTS_DIR, help="Directory for the results CSV.")
    league.add_argument("--no-csv", action="store_true", help="Skip the CSV export.")

    return ap


def _cmd_play(args: argparse.Namespace, ap: argparse.ArgumentParser) -> int:
    try:
        black = parse_agent_spec(args.black)
        white = parse_agent_spec(args.white)
    except ValueError as e:
        ap.error(str(e))

    print(f"Black: {black.name} | White: {white.name}")
    res = play_game(black, white, size=args.size, opening_plies=args.opening_plies, seed=args.seed)

    print(res.board)
    print(f"Score - Black: {res.black}, White: {res.white} ({res.plies} plies)")
    if res.winner is None:
        print("Draw.")
    else:
        print(f"{'Black' if res.winner == BLACK else 'White'} wins.")
    return 0


def _cmd_league(args: argparse.Namespace) -> int:
    roster = build_roster(max_depth=args.max_depth)
    print(f"Roster size: {len(roster)} teams")

    start = time.perf_counter()
    agg = run_league(
        roster,
        games_per_pair=args.games_per_pair,
        seed=args.seed,
        size=args.size,
        opening_plies=args.opening_plies,
        max_workers=args.workers,
    )
    rows = standings(agg)
    print_standings(rows)

    if not args.no_csv:
        path = export_csv(rows, Path(args.out))
        print(f"Wrote CSV: {path}")

    print(f"Total runtime: {time.perf_counter() - start:0.3f}s")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)
    if args.size < 2 or args.size % 2:
        ap.error("--size must be an even number >= 2.")
    configure_logging(args.log_level)

    if args.cmd == "play":
        return _cmd_play(args, ap)
    return _cmd_league(args)


if __name__ == "__main__":
    raise SystemExit(main())
