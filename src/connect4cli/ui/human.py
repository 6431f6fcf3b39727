from __future__ import annotations

from connect4cli.types import Move
from connect4cli.game.state import GameState


class HumanAgent:
    """Marker agent: the controller reads a column from the keyboard instead."""

    name = "Human"

    def __init__(self, name: str = "Human") -> None:
        self.name = name

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called.")


def is_human(agent: object) -> bool:
    return isinstance(agent, HumanAgent)
