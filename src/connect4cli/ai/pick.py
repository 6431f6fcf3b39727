from __future__ import annotations

import random
from typing import Optional

from connect4cli.ai.base import Agent
from connect4cli.types import Difficulty


DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium", "hard")


def agent_for(difficulty: Difficulty, seed: Optional[int] = None) -> Agent:
    """
    Build the computer opponent for a difficulty.
    A seed makes every random choice the agent takes reproducible.
    """
    from connect4cli.ai.easy_agent import EasyAgent
    from connect4cli.ai.medium_agent import MediumAgent
    from connect4cli.ai.hard_agent import HardAgent

    rng = random.Random(seed)

    if difficulty == "easy":
        return EasyAgent(rng=rng)
    if difficulty == "medium":
        return MediumAgent(rng=rng)
    if difficulty == "hard":
        return HardAgent(rng=rng)

    raise ValueError(f"Unknown difficulty: {difficulty!r}")
