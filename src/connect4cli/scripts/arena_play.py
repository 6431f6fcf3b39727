from __future__ import annotations

import random
from typing import Dict, Tuple

from connect4cli.core.board import Board
from connect4cli.core.rules import winning
from connect4cli.game.results import Outcome, draw
from connect4cli.game.state import GameState
from connect4cli.types import other

from .arena_types import Agg

OPENING_PLIES = 2


def play_headless(agent_r, agent_y, seed_base: int = 0) -> Tuple[Outcome, Dict[str, Dict[str, int]]]:
    """
    Play one game without rendering. The first two plies are random so
    repeated pairings of deterministic agents still differ.
    """
    state = GameState(board=Board(), current="R", last_status="")
    stats = {
        "R": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
        "Y": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
    }

    rng = random.Random(seed_base)
    for _ in range(OPENING_PLIES):
        state.board.drop(rng.choice(state.board.valid_moves()), state.current)
        state.moves += 1
        state.current = other(state.current)

    while True:
        if draw(state.board):
            return "draw", stats

        agent = agent_r if state.current == "R" else agent_y
        move = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["depth"] += int(info.get("depth", 0))

        placed = state.board.drop(move.column, state.current)
        state.moves += 1
        if winning(state.board, placed, state.current):
            return state.current, stats
        state.current = other(state.current)


def add_result(agg_a: Agg, agg_b: Agg, outcome: Outcome, a_is_red: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "draw":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "R") == a_is_red
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def add_side_stats(agg: Agg, side: Dict[str, int]) -> None:
    agg.moves += side["moves"]
    agg.time_ms += side["time_ms"]
    agg.nodes += side["nodes"]
    agg.depth_sum += side["depth"]
