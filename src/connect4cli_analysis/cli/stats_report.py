from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import load_stats
from ..metrics.summarize import stats_summary
from ..plots.chart import plot_stats_bars


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect4cli_analysis stats",
        description="Summarize the persistent win/loss statistics file.",
    )
    ap.add_argument("--csv", type=str, default="connect4_stats.csv", help="Statistics CSV written by the game")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving the chart")
    ap.add_argument("--show", action="store_true", help="Show the chart instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Table only")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = Path(args.csv)
    summary = stats_summary(load_stats(csv_path))

    print(f"Loaded: {csv_path}")
    print(summary.to_string(index=False))

    if not args.no_plots:
        out = plot_stats_bars(summary, Path(args.outdir), show=args.show)
        if out is not None:
            print(f"Wrote: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
