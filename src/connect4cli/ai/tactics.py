from __future__ import annotations

import logging
from typing import Optional

from connect4cli.core.board import Board
from connect4cli.core.rules import winning
from connect4cli.types import Move, Player

logger = logging.getLogger(__name__)


def find_winning_move(board: Board, player: Player) -> Optional[Move]:
    """
    First column (left to right) where dropping `player`'s piece wins at once.
    The board is left exactly as it was.
    """
    for c in board.valid_moves():
        with board.simulate(c, player) as m:
            if winning(board, m, player):
                logger.debug("winning move for %s at column %d", player, c)
                return m
    return None
