from __future__ import annotations
from typing import List, Literal, Optional, Tuple

from connect4cli.config import CONNECT_N
from connect4cli.core.board import Board
from connect4cli.core.rules import AXES, winning
from connect4cli.types import Move, Player

Coord = Tuple[int, int]
Outcome = Literal["R", "Y", "draw"]


def winning_line(board: Board, move: Move, player: Player) -> Optional[List[Coord]]:
    """
    Cells of the line completed by `move`, or None if it did not win.
    Every same-colour cell on the winning axis is returned, so a five
    in a row highlights all five.
    """
    if not winning(board, move, player):
        return None

    g = board.grid
    for dr, dc in AXES:
        line = [(move.row, move.column)]
        for sign in (1, -1):
            r, c = move.row + sign * dr, move.column + sign * dc
            while 0 <= r < board.rows and 0 <= c < board.cols and g[r][c] == player:
                line.append((r, c))
                r += sign * dr
                c += sign * dc
        if len(line) >= CONNECT_N:
            return sorted(line)
    return None


def draw(board: Board) -> bool:
    return board.move_count() >= board.rows * board.cols or board.is_full()
