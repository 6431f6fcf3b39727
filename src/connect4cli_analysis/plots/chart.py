from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    if x not in df.columns or y not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[y])):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.8)
    if "name" in df.columns:
        for _, row in df.iterrows():
            plt.annotate(str(row["name"]), (row[x], row[y]), fontsize=8)
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)

    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(8, 4))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=30, ha="right")

    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)


def plot_stats_bars(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked wins/draws/abandoned per game mode."""
    cols = [c for c in ("p1_wins", "p2_wins", "draws", "abandoned") if c in summary.columns]
    if "mode" not in summary.columns or not cols:
        return None

    fig, ax = plt.subplots(figsize=(8, 4))
    bottom = pd.Series(0, index=summary.index, dtype=float)
    for c in cols:
        vals = summary[c].astype(float)
        ax.bar(summary["mode"].astype(str), vals, bottom=bottom, label=c)
        bottom = bottom + vals
    ax.set_title("Results by game mode")
    ax.set_xlabel("mode")
    ax.set_ylabel("games")
    ax.legend()

    return _finish(fig, outdir, "stats_by_mode.png", show=show)
