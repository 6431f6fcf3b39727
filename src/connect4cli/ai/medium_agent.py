from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from connect4cli.ai.base import NoLegalMoves
from connect4cli.ai.easy_agent import select_easy_move
from connect4cli.ai.tactics import find_winning_move
from connect4cli.config import CENTER_PREFERENCE, STRATEGIC_MOVE_CHANCE
from connect4cli.core.board import Board
from connect4cli.game.state import GameState
from connect4cli.types import Move, Player, other

logger = logging.getLogger(__name__)

# Bonus by distance from the center column: 3, 2, 1, then 0 on the edges.
CENTER_DISTANCE_BONUS = (3, 2, 1, 0)


def _line_run(board: Board, row: int, col: int, player: Player, dr: int, dc: int) -> int:
    g = board.grid
    count = 1
    for sign in (1, -1):
        r, c = row + sign * dr, col + sign * dc
        while 0 <= r < board.rows and 0 <= c < board.cols and g[r][c] == player:
            count += 1
            r += sign * dr
            c += sign * dc
    return count


def count_threats(board: Board, col: int, player: Player) -> int:
    """
    Connection score for dropping `player` into `col`: each horizontal or
    vertical run of two or more through the landing cell adds its length.
    """
    threats = 0
    with board.simulate(col, player) as m:
        for dr, dc in ((0, 1), (1, 0)):
            n = _line_run(board, m.row, m.column, player, dr, dc)
            if n >= 2:
                threats += n
    return threats


def center_bonus(col: int, center: int = 3) -> int:
    d = abs(col - center)
    return CENTER_DISTANCE_BONUS[d] if d < len(CENTER_DISTANCE_BONUS) else 0


def find_best_strategic_move(board: Board, player: Player) -> Optional[Move]:
    best_score = -1
    best: Optional[Move] = None
    for c in board.valid_moves():
        score = count_threats(board, c, player) + center_bonus(c, board.cols // 2)
        if score > best_score:
            best_score = score
            best = Move(board.landing_row(c), c)
    return best


def shuffled_center_preference(rng: random.Random) -> List[int]:
    order = list(CENTER_PREFERENCE)
    n = len(order)
    for i in range(n):
        j = rng.randrange(n)
        order[i], order[j] = order[j], order[i]
    return order


def select_medium_move(board: Board, player: Player, rng: random.Random) -> Move:
    """
    Win > block > strategic (most of the time) > shuffled center-biased column.
    """
    if board.is_full():
        raise NoLegalMoves("No valid moves.")

    m = find_winning_move(board, player)
    if m is not None:
        return m

    m = find_winning_move(board, other(player))
    if m is not None:
        logger.debug("medium: blocking column %d", m.column)
        return m

    m = find_best_strategic_move(board, player)
    if m is not None and rng.random() < STRATEGIC_MOVE_CHANCE:
        logger.debug("medium: strategic column %d", m.column)
        return m

    for col in shuffled_center_preference(rng):
        row = board.landing_row(col)
        if row >= 0:
            return Move(row, col)

    return select_easy_move(board, rng)  # unreachable while a column is open


@dataclass(slots=True)
class MediumAgent:
    """
    Tactical agent:
      1) Play immediate winning move if available
      2) Block opponent immediate winning move
      3) Best connection/center column, 70% of the time
      4) Otherwise first open column of a shuffled center-first order
    """
    name: str = "Computer (Medium)"
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        start = time.perf_counter()
        move = select_medium_move(state.board, state.current, self.rng)
        self.last_info = {
            "depth": 1,
            "nodes": len(state.board.valid_moves()),
            "move_col": move.column + 1,
            "time_ms": max(1, int((time.perf_counter() - start) * 1000)),
        }
        return move
