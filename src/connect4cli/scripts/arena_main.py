from __future__ import annotations

import argparse
import csv
import itertools
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from connect4cli.ai.pick import DIFFICULTIES, agent_for
from connect4cli.ui.colors import paint, rule

from .arena_play import add_result, add_side_stats, play_headless
from .arena_scoring import avg_depth, avg_ms_per_move, ppg, standings, strength_score
from .arena_types import Agg, Entrant

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "difficulty",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_depth",
]


def build_entrants() -> List[Entrant]:
    return [
        Entrant(f"Computer ({d.capitalize()})", d, lambda seed, d=d: agent_for(d, seed))
        for d in DIFFICULTIES
    ]


def run_arena(entrants: List[Entrant], games_per_pair: int = 4, seed: int = 1234) -> Dict[str, Agg]:
    """Round robin; colours alternate game by game within each pairing."""
    agg: Dict[str, Agg] = {e.name: Agg() for e in entrants}

    for pair_idx, (a, b) in enumerate(itertools.combinations(entrants, 2)):
        for g in range(games_per_pair):
            base = seed + 1000 * pair_idx + g
            a_is_red = (g % 2 == 0)
            agent_a = a.make(base + 101)
            agent_b = b.make(base + 202)
            if a_is_red:
                outcome, stats = play_headless(agent_a, agent_b, seed_base=base)
            else:
                outcome, stats = play_headless(agent_b, agent_a, seed_base=base)

            add_result(agg[a.name], agg[b.name], outcome, a_is_red)
            add_side_stats(agg[a.name], stats["R" if a_is_red else "Y"])
            add_side_stats(agg[b.name], stats["Y" if a_is_red else "R"])
            logger.info("%s vs %s game %d: %s", a.name, b.name, g + 1, outcome)

    return agg


def print_table(agg: Dict[str, Agg], z: float) -> None:
    rows = standings(agg, z)
    print(paint("Arena standings", "heading"))
    print(paint(f"{'rk':>3}  {'agent':<22}{'strength':>10}{'ppg':>7}{'W-D-L':>10}{'ms/mv':>9}", "hint"))
    print(paint(rule(), "hint"))
    for i, (name, a) in enumerate(rows, start=1):
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(
            f"{i:>3}  {name:<22}{strength_score(a, z):>10.4f}{ppg(a):>7.3f}"
            f"{wdl:>10}{avg_ms_per_move(a):>9.1f}"
        )
    print(paint(rule(), "hint"))


def export_csv(agg: Dict[str, Agg], entrants: List[Entrant], outdir: Path, z: float) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = outdir / f"arena_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for e in entrants:
            a = agg[e.name]
            w.writerow([
                e.name, e.difficulty,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3),
                a.moves, a.time_ms, a.nodes, round(avg_depth(a), 3),
            ])
    return out_path


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Play the computer difficulties against each other.")
    ap.add_argument("--games", type=int, default=4, help="Games per pairing (colours alternate)")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--z", type=float, default=1.28, help="Z for Wilson lower bound")
    ap.add_argument("--out", type=str, default="data/results", help="Directory for arena_results_*.csv")
    ap.add_argument("--no-csv", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    entrants = build_entrants()
    start = time.perf_counter()
    agg = run_arena(entrants, games_per_pair=args.games, seed=args.seed)
    print_table(agg, args.z)

    if not args.no_csv:
        out_path = export_csv(agg, entrants, Path(args.out), args.z)
        print(f"Wrote CSV: {out_path}")

    print(paint(f"Total runtime: {time.perf_counter() - start:0.3f}s", "title"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
