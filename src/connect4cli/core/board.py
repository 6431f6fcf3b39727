# src/connect4cli/core/board.py

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from connect4cli.config import ROWS, COLS
from connect4cli.types import Cell, Column, Move, Player

_SYMBOLS = {".": None, "R": "R", "Y": "Y"}


class IllegalSimulation(ValueError):
    """Raised when a search tries to simulate a move in a full column."""


@dataclass(slots=True)
class Board:
    grid: List[List[Cell]] = field(default_factory=list)

    # Fixed 6x7; row 0 is the top row.
    rows = ROWS
    cols = COLS

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        if len(self.grid) != self.rows or any(len(r) != self.cols for r in self.grid):
            raise ValueError(f"Board must be {self.rows}x{self.cols}.")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from top-to-bottom strings of '.', 'R' and 'Y'.
        Handy for fixtures; gravity is not checked.
        """
        grid: List[List[Cell]] = []
        for line in rows:
            line = line.replace(" ", "")
            try:
                grid.append([_SYMBOLS[ch] for ch in line])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r}.") from None
        return cls(grid)

    def copy(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)

    def valid_moves(self) -> List[Column]:
        return [Column(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def move_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def landing_row(self, col: int) -> int:
        """Lowest empty row of a column, or -1 when the column is full."""
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return -1

    def resolve(self, col: int) -> Move:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        r = self.landing_row(c)
        if r < 0:
            raise ValueError("Column full, please choose another column")
        return Move(r, c)

    def drop(self, col: int, player: Player) -> Move:
        """Commit a piece for real. Not meant to be undone."""
        move = self.resolve(col)
        self.grid[move.row][move.column] = player
        return move

    # ---- move simulator (search only) ----

    def place(self, col: int, player: Player) -> int:
        r = self.landing_row(col)
        if r >= 0:
            self.grid[r][col] = player
        return r

    def retract(self, row: int, col: int) -> None:
        self.grid[row][col] = None

    @contextmanager
    def simulate(self, col: int, player: Player) -> Iterator[Move]:
        """
        Place a piece for the duration of the with-block.
        The cell is always cleared on exit, including on break/return/raise.
        """
        r = self.place(col, player)
        if r < 0:
            raise IllegalSimulation(f"Cannot simulate in full column {col}.")
        try:
            yield Move(r, col)
        finally:
            self.retract(r, col)
