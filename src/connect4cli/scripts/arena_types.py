from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from connect4cli.types import Difficulty


@dataclass(frozen=True)
class Entrant:
    name: str
    difficulty: Difficulty
    make: Callable[[int], object]  # seed -> agent


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth_sum: int = 0
