from __future__ import annotations

from math import sqrt
from typing import Dict, List, Tuple

from .arena_types import Agg


def _ratio(num: float, den: float) -> float:
    return num / den if den else 0.0


def ppg(a: Agg) -> float:
    """Points per game: a win is 1, a draw 0.5."""
    return _ratio(a.points, a.games)


def avg_ms_per_move(a: Agg) -> float:
    return _ratio(a.time_ms, a.moves)


def avg_depth(a: Agg) -> float:
    return _ratio(a.depth_sum, a.moves)


def wilson_lcb(p: float, n: int, z: float) -> float:
    """
    Wilson lower bound for a success rate `p` observed over `n` games.
    Small samples are pulled towards 0.5, so one lucky win ranks below a
    long record of good results.
    """
    if n <= 0:
        return 0.0
    p = min(1.0, max(0.0, p))
    spread = z * z / n
    mid = p + spread / 2
    half_width = z * sqrt(p * (1 - p) / n + spread / (4 * n))
    return max(0.0, (mid - half_width) / (1 + spread))


def strength_score(a: Agg, z: float) -> float:
    return wilson_lcb(ppg(a), a.games, z)


def standings(agg: Dict[str, Agg], z: float) -> List[Tuple[str, Agg]]:
    """Entrants best first; the Wilson bound decides, points per game breaks ties."""
    return sorted(agg.items(), key=lambda kv: (strength_score(kv[1], z), ppg(kv[1])), reverse=True)
