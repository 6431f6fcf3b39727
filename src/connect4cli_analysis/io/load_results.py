from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from connect4cli.game.stats import CSV_COLUMNS as STATS_COLUMNS

# Columns written by `connect4-arena`; name and difficulty stay text.
ARENA_NUMERIC_COLS = (
    "games", "wins", "draws", "losses", "points", "ppg",
    "strength_wilson_lcb", "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
)

STATS_NUMERIC_COLS = tuple(c for c in STATS_COLUMNS if c != "mode")


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    key_col: str = "name"
    numeric_cols: tuple[str, ...] = ARENA_NUMERIC_COLS


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """
    Read an arena or statistics CSV into a frame keyed by `spec.key_col`.

    Numeric columns that fail to parse become NaN rather than failing the
    whole load; rows without a key are dropped.
    """
    if not spec.csv_path.is_file():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path, skipinitialspace=True).rename(columns=str.strip)
    if spec.key_col not in df.columns:
        raise ValueError(f"{spec.csv_path.name} has no {spec.key_col!r} column; found {list(df.columns)}")

    present = [c for c in spec.numeric_cols if c in df.columns]
    if present:
        df[present] = df[present].apply(pd.to_numeric, errors="coerce")

    keys = df[spec.key_col].fillna("").astype(str).str.strip()
    return df.assign(**{spec.key_col: keys}).loc[keys != ""].reset_index(drop=True)


def load_stats(csv_path: Path) -> pd.DataFrame:
    return load_results(LoadSpec(csv_path, key_col="mode", numeric_cols=STATS_NUMERIC_COLS))


def load_latest_from_dir(results_dir: Path, pattern: str = "arena_results_*.csv") -> Path:
    """Newest arena export in `results_dir`; the timestamp in the name orders them."""
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    latest: Optional[Path] = max(results_dir.glob(pattern), key=lambda p: p.name, default=None)
    if latest is None:
        raise FileNotFoundError(f"No {pattern} files in {results_dir}")
    return latest
