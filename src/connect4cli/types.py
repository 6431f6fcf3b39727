# src/connect4cli/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, NewType

Player = Literal["R", "Y"]     # "R" = player one (red), "Y" = player two (yellow)
Cell = Optional[Player]
Column = NewType("Column", int)   # column index 0..6
Difficulty = Literal["easy", "medium", "hard"]


@dataclass(frozen=True, slots=True)
class Move:
    row: int
    column: int


def other(p: Player) -> Player:
    return "Y" if p == "R" else "R"
