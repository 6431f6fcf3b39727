from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Literal, Optional

from connect4cli.game.results import Outcome

logger = logging.getLogger(__name__)

Mode = Literal["pvp", "easy", "medium", "hard"]
MODES: tuple[Mode, ...] = ("pvp", "easy", "medium", "hard")

MODE_TITLES = {
    "pvp": "Player vs Player",
    "easy": "Player vs Computer (Easy)",
    "medium": "Player vs Computer (Medium)",
    "hard": "Player vs Computer (Hard)",
}

CSV_COLUMNS = ["mode", "games", "p1_wins", "p2_wins", "draws"]


@dataclass
class ModeRecord:
    games: int = 0
    p1_wins: int = 0
    p2_wins: int = 0  # player 2, or the computer
    draws: int = 0


@dataclass
class Stats:
    """
    Win/loss counters per game mode, saved as a small CSV after each game.
    """
    path: Optional[Path] = None
    records: Dict[str, ModeRecord] = field(default_factory=lambda: {m: ModeRecord() for m in MODES})

    @classmethod
    def load(cls, path: Path) -> "Stats":
        stats = cls(path=path)
        if not path.exists():
            return stats

        try:
            with open(path, newline="") as f:
                for row in csv.DictReader(f):
                    mode = row["mode"].strip()
                    if mode not in stats.records:
                        logger.warning("ignoring unknown mode %r in %s", mode, path)
                        continue
                    stats.records[mode] = ModeRecord(
                        games=int(row["games"]),
                        p1_wins=int(row["p1_wins"]),
                        p2_wins=int(row["p2_wins"]),
                        draws=int(row["draws"]),
                    )
        except (OSError, ValueError, KeyError) as e:
            logger.warning("could not read stats from %s (%s); starting fresh", path, e)
            return cls(path=path)

        return stats

    def save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow(CSV_COLUMNS)
            for mode in MODES:
                r = self.records[mode]
                w.writerow([mode] + [getattr(r, fl.name) for fl in fields(ModeRecord)])

    def start_game(self, mode: Mode) -> None:
        self.records[mode].games += 1
        self.save()

    def record_result(self, mode: Mode, outcome: Outcome) -> None:
        r = self.records[mode]
        if outcome == "R":
            r.p1_wins += 1
        elif outcome == "Y":
            r.p2_wins += 1
        else:
            r.draws += 1
        logger.info("%s: result %s recorded", mode, outcome)
        self.save()

    def lines(self) -> list[str]:
        out = ["=== Statistics ==="]
        for mode in MODES:
            r = self.records[mode]
            other_side = "Player 2" if mode == "pvp" else "Computer"
            out.append(MODE_TITLES[mode])
            out.append(
                f"Games: {r.games}  Player 1: {r.p1_wins}  {other_side}: {r.p2_wins}  Draws: {r.draws}"
            )
        return out
