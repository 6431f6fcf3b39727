from __future__ import annotations
from typing import Sequence

from connect4cli.config import CENTER_COL
from connect4cli.core.board import Board
from connect4cli.core.rules import WINDOWS
from connect4cli.types import Cell, Player, other

WIN_SCORE = 100
THREE_SCORE = 5
TWO_SCORE = 2
OPP_WIN_PENALTY = 100
OPP_THREE_PENALTY = 4
CENTER_BONUS = 3


def score_window(cells: Sequence[Cell], player: Player) -> int:
    opp = other(player)

    p_count = 0
    o_count = 0
    e_count = 0
    for v in cells:
        if v == player:
            p_count += 1
        elif v == opp:
            o_count += 1
        else:
            e_count += 1

    score = 0

    # Player lines
    if p_count == 4:
        score += WIN_SCORE
    elif p_count == 3 and e_count == 1:
        score += THREE_SCORE
    elif p_count == 2 and e_count == 2:
        score += TWO_SCORE

    # Opponent threats (a mixed window matches neither branch)
    if o_count == 4:
        score -= OPP_WIN_PENALTY
    elif o_count == 3 and e_count == 1:
        score -= OPP_THREE_PENALTY

    return score


def evaluate(board: Board, player: Player) -> int:
    """
    Static score of the position from `player`'s point of view.

    Every 4-cell window contributes according to its composition, then each
    of the player's pieces in the center column adds a flat bonus. Does not
    touch the board.
    """
    g = board.grid
    score = 0

    for coords in WINDOWS:
        score += score_window([g[r][c] for (r, c) in coords], player)

    # center column preference (strong in Connect 4)
    for r in range(board.rows):
        if g[r][CENTER_COL] == player:
            score += CENTER_BONUS

    return score

