from __future__ import annotations

import argparse
from pathlib import Path

from othello.config import RESULTS_DIR, RESULTS_PATTERN

from ..io.league_csv import NUMERIC_COLS, absent_columns, latest_csv, read_league_csv
from ..metrics.summarize import RankConfig, depth_curve, family_table, rank_teams
from ..plots.chart import plot_cost_vs_rating, plot_depth_curve, plot_ranking, plot_share_vs_passes


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="othello_analysis", description="Analyze Othello league CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Directory containing league_results_*.csv")
    ap.add_argument("--pattern", type=str, default=RESULTS_PATTERN, help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="data/figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Tables only")

    ap.add_argument("--top", type=int, default=20, help="Top N teams in the ranking")
    ap.add_argument("--metric", choices=NUMERIC_COLS, default="rating", help="Ranking metric")
    ap.add_argument("--min-games", type=int, default=0, help="Leave out teams with fewer games")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    csv_path = Path(args.csv) if args.csv else latest_csv(Path(args.results_dir), pattern=args.pattern)
    df = read_league_csv(csv_path)

    print(f"\nLoaded: {csv_path}")
    print(f"Teams: {len(df):,}  Games played: {int(df['games'].sum()) // 2:,}")
    absent = absent_columns(df)
    if absent:
        print("Absent columns:", ", ".join(absent))

    cfg = RankConfig(metric=args.metric, top_n=args.top, min_games=args.min_games)
    ranked = rank_teams(df, cfg)
    print(f"\n=== Ranking by {args.metric} ===")
    print(ranked.to_string(index=False))

    families = family_table(df)
    print("\n=== By strategy family ===")
    print(families.to_string(index=False))

    curve = depth_curve(df)
    if not curve.empty:
        print("\n=== Search depth curve ===")
        print(curve.to_string(index=False))

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_ranking(ranked, outdir, metric=args.metric, show=args.show)
    plot_depth_curve(curve, outdir, show=args.show)
    plot_cost_vs_rating(df, outdir, show=args.show)
    plot_share_vs_passes(df, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
