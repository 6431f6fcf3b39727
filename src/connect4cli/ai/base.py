from __future__ import annotations
from typing import Protocol

from connect4cli.game.state import GameState
from connect4cli.types import Move


class NoLegalMoves(ValueError):
    """A move was requested on a full board."""


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
