from __future__ import annotations
from typing import Iterator, List, Tuple

from connect4cli.config import ROWS, COLS, CONNECT_N
from connect4cli.types import Move, Player
from connect4cli.core.board import Board

Coord = Tuple[int, int]  # (row, col)

# (d_row, d_col) for one half of each axis; the other half is the negation.
AXES: Tuple[Tuple[int, int], ...] = (
    (1, 0),    # vertical
    (0, 1),    # horizontal
    (-1, 1),   # diagonal "/"
    (1, 1),    # diagonal "\"
)


def _run_length(board: Board, move: Move, player: Player, dr: int, dc: int) -> int:
    """
    Count the placed piece plus same-player cells on both sides of one axis.
    Both scans add to the same count; it is never reset between them.
    """
    g = board.grid
    count = 1
    for sign in (1, -1):
        r, c = move.row + sign * dr, move.column + sign * dc
        while count < CONNECT_N and 0 <= r < ROWS and 0 <= c < COLS and g[r][c] == player:
            count += 1
            r += sign * dr
            c += sign * dc
    return count


def winning(board: Board, last_move: Move, player: Player) -> bool:
    """True if the piece just played at last_move completes four in a row."""
    if board.grid[last_move.row][last_move.column] != player:
        raise ValueError(
            f"Cell ({last_move.row}, {last_move.column}) does not hold player {player}."
        )
    for dr, dc in AXES:
        if _run_length(board, last_move, player, dr, dc) >= CONNECT_N:
            return True
    return False


def has_winner(board: Board) -> bool:
    g = board.grid
    for r in range(ROWS):
        for c in range(COLS):
            p = g[r][c]
            if p is not None and winning(board, Move(r, c), p):
                return True
    return False


def is_game_over(board: Board) -> bool:
    return has_winner(board) or board.is_full()


def iter_windows(rows: int = ROWS, cols: int = COLS) -> Iterator[List[Coord]]:
    n = CONNECT_N
    reach = CONNECT_N - 1

    # Horizontal
    for r in range(rows):
        for c in range(cols - reach):
            yield [(r, c + i) for i in range(n)]

    # Vertical
    for c in range(cols):
        for r in range(rows - reach):
            yield [(r + i, c) for i in range(n)]

    # Diagonal "\" (down-right from the top-left cell)
    for r in range(rows - reach):
        for c in range(cols - reach):
            yield [(r + i, c + i) for i in range(n)]

    # Diagonal "/" (up-right from the bottom-left cell)
    for r in range(reach, rows):
        for c in range(cols - reach):
            yield [(r - i, c + i) for i in range(n)]


# Windows never change for a fixed 6x7 grid.
WINDOWS: Tuple[Tuple[Coord, ...], ...] = tuple(tuple(w) for w in iter_windows())
