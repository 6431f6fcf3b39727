from __future__ import annotations

import argparse
import logging
from pathlib import Path

from connect4cli.config import LOG_LEVEL, STATS_PATH
from connect4cli.game.stats import Stats
from connect4cli.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect4", description="Terminal Connect 4 against a human or the computer.")
    ap.add_argument("--stats", type=str, default=STATS_PATH, help="CSV file holding win/loss statistics")
    ap.add_argument("--seed", type=int, default=None, help="Seed the computer opponents (reproducible games)")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    stats = Stats.load(Path(args.stats))
    try:
        run_menu(stats, seed=args.seed)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
