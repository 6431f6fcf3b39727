from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import random
import time
from typing import Optional

from connect4cli.ai.base import NoLegalMoves
from connect4cli.ai.easy_agent import select_easy_move
from connect4cli.ai.tactics import find_winning_move
from connect4cli.config import MAX_SEARCH_DEPTH, SEARCH_DEPTH
from connect4cli.core.board import Board
from connect4cli.core.rules import is_game_over
from connect4cli.core.scoring import evaluate
from connect4cli.game.state import GameState
from connect4cli.types import Move, Player, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchCounters:
    nodes: int = 0
    cutoffs: int = 0


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    root_player: Player,
    counters: Optional[SearchCounters] = None,
) -> float:
    """
    Depth-limited minimax with alpha-beta pruning.

    Leaves are always scored from `root_player`'s side, on minimizing plies
    too. Columns are tried left to right and every simulated piece is
    retracted before the next sibling or a cutoff.
    """
    if counters is not None:
        counters.nodes += 1

    if depth == 0 or is_game_over(board):
        return evaluate(board, root_player)

    moves = board.valid_moves()
    if not moves:
        return 0  # draw

    if maximizing:
        best = -inf
        for c in moves:
            with board.simulate(c, root_player):
                v = minimax(board, depth - 1, alpha, beta, False, root_player, counters)
            best = max(best, v)
            alpha = max(alpha, v)
            if beta <= alpha:
                if counters is not None:
                    counters.cutoffs += 1
                break
        return best

    worst = inf
    opp = other(root_player)
    for c in moves:
        with board.simulate(c, opp):
            v = minimax(board, depth - 1, alpha, beta, True, root_player, counters)
        worst = min(worst, v)
        beta = min(beta, v)
        if beta <= alpha:
            if counters is not None:
                counters.cutoffs += 1
            break
    return worst


def select_hard_move(
    board: Board,
    player: Player,
    depth: int = SEARCH_DEPTH,
    rng: Optional[random.Random] = None,
    counters: Optional[SearchCounters] = None,
) -> Move:
    """
    Immediate win, then immediate block, then full-width minimax over every
    legal column. Ties go to the leftmost column.
    """
    if board.is_full():
        raise NoLegalMoves("No valid moves.")

    m = find_winning_move(board, player)
    if m is not None:
        return m

    m = find_winning_move(board, other(player))
    if m is not None:
        logger.debug("hard: blocking column %d", m.column)
        return m

    best_score = -inf
    best_col: Optional[int] = None
    for c in board.valid_moves():
        with board.simulate(c, player):
            score = minimax(board, depth - 1, -inf, inf, False, player, counters)
        logger.debug("hard: column %d scored %s", c, score)
        if score > best_score:
            best_score = score
            best_col = c

    if best_col is None:
        logger.warning("hard: search produced no scored column, falling back to random")
        return select_easy_move(board, rng or random.Random())

    return Move(board.landing_row(best_col), best_col)


@dataclass(slots=True)
class HardAgent:
    name: str = "Computer (Hard)"
    depth: int = SEARCH_DEPTH
    rng: random.Random = field(default_factory=random.Random)

    # Stats
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 1 <= self.depth <= MAX_SEARCH_DEPTH:
            raise ValueError(f"Search depth must be between 1 and {MAX_SEARCH_DEPTH}.")

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        me: Player = state.current

        start = time.perf_counter()
        counters = SearchCounters()
        move = select_hard_move(board, me, self.depth, self.rng, counters)
        elapsed = time.perf_counter() - start

        with board.simulate(move.column, me):
            eval_after = evaluate(board, me)

        self.last_info = {
            "depth": self.depth if counters.nodes else 1,
            "nodes": counters.nodes,
            "cutoffs": counters.cutoffs,
            "eval": eval_after,
            "move_col": move.column + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("hard: %s", self.last_info)
        return move
