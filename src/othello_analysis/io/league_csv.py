from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from othello.config import RESULTS_PATTERN
from othello.scripts.league_core import CSV_COLUMNS

REQUIRED_COLS = ("name", "games", "rating")
NUMERIC_COLS = [c for c in CSV_COLUMNS if c != "name"]

# "Minimax d3 disk", "Maxmax d2", "Random seed0", "Greedy"
_TEAM_RE = re.compile(r"^(?P<family>[A-Za-z]+)(?:\s+d(?P<depth>\d+))?(?:\s+(?P<heuristic>[a-z]+))?")
_FAMILY_HEURISTIC = {"Maxmax": "mobility"}


def describe_team(name: str) -> Tuple[str, Optional[int], Optional[str]]:
    """Split a roster name into (family, search depth, heuristic)."""
    m = _TEAM_RE.match(name.strip())
    if m is None:
        return name, None, None
    family = m.group("family")
    depth = int(m.group("depth")) if m.group("depth") else None
    heuristic = m.group("heuristic") if depth is not None else None
    if depth is not None and heuristic is None:
        heuristic = _FAMILY_HEURISTIC.get(family)
    return family, depth, heuristic


def read_league_csv(path: Path) -> pd.DataFrame:
    """
    Load one league export. Numeric columns are coerced (bad cells become
    NaN) and each row gains family / depth / heuristic parsed from its name.
    """
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")

    df = pd.read_csv(path)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is not a league export; missing {missing}. Columns: {list(df.columns)}")

    for c in NUMERIC_COLS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")

    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"].str.len() > 0].copy()

    parts = [describe_team(n) for n in df["name"]]
    df["family"] = [p[0] for p in parts]
    df["depth"] = pd.array([p[1] for p in parts], dtype="Int64")
    df["heuristic"] = [p[2] for p in parts]
    return df


def absent_columns(df: pd.DataFrame) -> List[str]:
    """Export columns an older or hand-made CSV does not carry."""
    return [c for c in CSV_COLUMNS if c not in df.columns]


def latest_csv(results_dir: Path, pattern: str = RESULTS_PATTERN) -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # league_results_<YYYYmmdd_HHMMSS>.csv sorts by time
    return files[-1]
