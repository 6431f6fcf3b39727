from __future__ import annotations

import random
import time
from dataclasses import dataclass, field

from connect4cli.ai.base import NoLegalMoves
from connect4cli.core.board import Board
from connect4cli.game.state import GameState
from connect4cli.types import Move


def select_easy_move(board: Board, rng: random.Random) -> Move:
    """Uniformly random column; a full column is simply drawn again."""
    if board.is_full():
        raise NoLegalMoves("No valid moves.")
    while True:
        col = rng.randrange(board.cols)
        row = board.landing_row(col)
        if row >= 0:
            return Move(row, col)


@dataclass(slots=True)
class EasyAgent:
    name: str = "Computer (Easy)"
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        start = time.perf_counter()
        move = select_easy_move(state.board, self.rng)
        self.last_info = {
            "depth": 0,
            "nodes": 0,
            "move_col": move.column + 1,
            "reason": "random",
            "time_ms": max(1, int((time.perf_counter() - start) * 1000)),
        }
        return move
