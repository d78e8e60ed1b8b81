from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd


def _finish(fig, outdir: Path, filename: str, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / filename
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path


def _numeric(df: pd.DataFrame, *cols: str) -> bool:
    return all(c in df.columns and pd.api.types.is_numeric_dtype(df[c]) for c in cols)


def plot_ranking(ranked: pd.DataFrame, outdir: Path, metric: str, *, show: bool) -> Path | None:
    """Horizontal bars in ranking order, best team on top."""
    if "name" not in ranked.columns or not _numeric(ranked, metric) or ranked.empty:
        return None

    fig, ax = plt.subplots(figsize=(8, max(3, 0.35 * len(ranked))))
    ax.barh(ranked["name"].astype(str), ranked[metric].astype(float))
    ax.invert_yaxis()
    ax.set_title(f"League ranking: {metric}")
    ax.set_xlabel(metric)
    return _finish(fig, outdir, f"ranking_{metric}.png", show)


def plot_depth_curve(curve: pd.DataFrame, outdir: Path, metric: str = "rating", *, show: bool) -> Path | None:
    if curve.empty or not _numeric(curve, "depth", metric):
        return None

    fig, ax = plt.subplots()
    for family, rows in curve.groupby("family"):
        ax.plot(rows["depth"], rows[metric], marker="o", label=str(family))
    ax.set_xticks(sorted(curve["depth"].unique()))
    ax.set_title(f"{metric} by search depth")
    ax.set_xlabel("depth (plies)")
    ax.set_ylabel(metric)
    ax.legend()
    return _finish(fig, outdir, f"depth_{metric}.png", show)


def plot_cost_vs_rating(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if not _numeric(df, "ms_per_move", "rating") or df.empty:
        return None

    fig, ax = plt.subplots()
    ax.scatter(df["ms_per_move"].clip(lower=0.01), df["rating"], alpha=0.7)
    for _, row in df.iterrows():
        ax.annotate(str(row["name"]), (max(row["ms_per_move"], 0.01), row["rating"]), fontsize=6, alpha=0.8)
    ax.set_xscale("log")
    ax.set_title("Rating vs thinking time")
    ax.set_xlabel("ms per move (log)")
    ax.set_ylabel("rating")
    return _finish(fig, outdir, "rating_vs_ms.png", show)


def plot_share_vs_passes(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Teams squeezed out of moves tend to lose the board; this shows by how much."""
    if not _numeric(df, "pass_rate", "disc_share") or df.empty:
        return None

    fig, ax = plt.subplots()
    ax.scatter(df["pass_rate"], df["disc_share"], alpha=0.7)
    ax.axhline(0.5, color="grey", linewidth=0.8, linestyle="--")
    for _, row in df.iterrows():
        ax.annotate(str(row["name"]), (row["pass_rate"], row["disc_share"]), fontsize=6, alpha=0.8)
    ax.set_title("Disc share vs pass rate")
    ax.set_xlabel("pass rate")
    ax.set_ylabel("disc share")
    return _finish(fig, outdir, "disc_share_vs_passes.png", show)
