from __future__ import annotations
from dataclasses import dataclass

from connect4cli.core.board import Board
from connect4cli.types import Player


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player
    last_status: str = "Player 1 starts."
    moves: int = 0
