from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "wins",
    "points",
    "nodes",
]

# Metrics where a smaller value ranks higher.
LOWER_IS_BETTER = frozenset({"avg_ms_per_move"})

STANDINGS_COLUMNS = (
    "name", "difficulty", "games", "wins", "draws", "losses",
    "ppg", "strength_wilson_lcb", "avg_ms_per_move", "nodes", "avg_depth",
)


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 10
    min_games: int = 0


def _check_columns(df: pd.DataFrame, needed: Iterable[str]) -> None:
    missing = sorted(set(needed) - set(df.columns))
    if missing:
        raise ValueError(f"Missing columns {missing}; frame has {list(df.columns)}")


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Best `top_n` arena entrants by `cfg.metric`, numbered from 1 in column "rk"."""
    _check_columns(df, ["name", cfg.metric] + (["games"] if cfg.min_games > 0 else []))

    pool = df if cfg.min_games <= 0 else df[df["games"].fillna(0) >= cfg.min_games]
    pick = pool.nsmallest if cfg.metric in LOWER_IS_BETTER else pool.nlargest
    ranked = pick(cfg.top_n, cfg.metric)

    table = ranked[[c for c in STANDINGS_COLUMNS if c in ranked.columns]].reset_index(drop=True)
    table.insert(0, "rk", range(1, len(table) + 1))
    return table


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    numbers = df.select_dtypes("number")
    return numbers.describe().T if not numbers.empty else pd.DataFrame()


def stats_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-mode win rates from the persistent statistics file.
    Games that were started but never finished count as abandoned.
    """
    _check_columns(df, ["mode", "games", "p1_wins", "p2_wins", "draws"])

    out = df[["mode", "games", "p1_wins", "p2_wins", "draws"]].copy()
    finished = out["p1_wins"] + out["p2_wins"] + out["draws"]
    out["abandoned"] = (out["games"] - finished).clip(lower=0)

    denom = finished.where(finished > 0)
    out["p1_win_rate"] = (out["p1_wins"] / denom).fillna(0.0).round(3)
    out["p2_win_rate"] = (out["p2_wins"] / denom).fillna(0.0).round(3)
    return out.reset_index(drop=True)
