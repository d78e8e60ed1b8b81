from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


# Lower is better for these; everything else ranks descending
ASCENDING_METRICS = {"pass_rate", "ms_per_move", "nodes_per_move"}

RANK_COLS = [
    "name",
    "games", "wins", "draws", "losses",
    "rating", "score_rate", "disc_share", "avg_disc_margin",
    "pass_rate", "flips_per_move", "ms_per_move",
]


@dataclass(frozen=True)
class RankConfig:
    metric: str = "rating"
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def rank_teams(df: pd.DataFrame, cfg: RankConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = df
    if cfg.min_games > 0:
        _require_cols(out, ["games"])
        out = out[out["games"].fillna(0) >= cfg.min_games]

    out = out.sort_values(cfg.metric, ascending=cfg.metric in ASCENDING_METRICS, kind="stable")
    keep = [c for c in RANK_COLS if c in out.columns]
    if cfg.metric not in keep:
        keep.append(cfg.metric)

    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def family_table(df: pd.DataFrame) -> pd.DataFrame:
    """Per strategy family: team count and mean rating, disc share, pass rate and speed."""
    _require_cols(df, ["family", "rating"])
    metrics = [c for c in ("rating", "disc_share", "pass_rate", "ms_per_move") if c in df.columns]
    grouped = df.groupby("family")
    out = grouped[metrics].mean()
    out.insert(0, "teams", grouped.size())
    return out.sort_values("rating", ascending=False).reset_index()


def depth_curve(df: pd.DataFrame) -> pd.DataFrame:
    """
    What each extra ply of lookahead buys: for every searching family, the
    rating, disc share and cost at each depth. Non-search teams are left out.
    """
    _require_cols(df, ["family", "depth", "rating"])
    search = df[df["depth"].notna()]
    if search.empty:
        return pd.DataFrame(columns=["family", "depth", "rating"])

    metrics = [c for c in ("rating", "disc_share", "ms_per_move", "nodes_per_move") if c in search.columns]
    out = search.groupby(["family", "depth"])[metrics].mean().reset_index()
    out["depth"] = out["depth"].astype(int)
    return out.sort_values(["family", "depth"]).reset_index(drop=True)
