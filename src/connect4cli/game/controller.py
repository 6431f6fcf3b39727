from __future__ import annotations

import logging
from typing import Callable, Optional

from connect4cli.ai.base import Agent
from connect4cli.core.board import Board
from connect4cli.core.rules import winning
from connect4cli.game.results import Outcome, draw, winning_line
from connect4cli.game.state import GameState
from connect4cli.game.stats import Mode, Stats
from connect4cli.types import Player, other
from connect4cli.ui.effects import ai_thinking
from connect4cli.ui.human import is_human
from connect4cli.ui.prompts import parse_column
from connect4cli.ui.render import render

logger = logging.getLogger(__name__)

TURN_LINES = {"R": "Player 1's turn (Red)", "Y": "Player 2's turn (Yellow)"}

WIN_LINES = {
    "pvp": {"R": "Player 1 (Red) wins!", "Y": "Player 2 (Yellow) wins!"},
    "easy": {"R": "Player (Red) wins!", "Y": "Computer Won! Better luck next time!"},
    "medium": {"R": "Player 1 (Red) wins!", "Y": "Computer Won! Better luck next time!"},
    "hard": {"R": "AMAZING! You beat the Hard AI!", "Y": "Computer Won! The AI is too strong!"},
}

DRAW_LINE = "It's a Draw!"


def thinking_label(mode: Mode) -> str:
    return "Computer is thinking hard..." if mode == "hard" else "Computer is thinking..."


def run_game(
    agent_r: Agent,
    agent_y: Agent,
    mode: Mode = "pvp",
    stats: Optional[Stats] = None,
    show_thinking: bool = True,
    input_fn: Callable[[str], str] = input,
) -> Optional[Outcome]:
    """
    Play one game to the end. Red always moves first.

    Returns the winner ("R"/"Y"), "draw", or None if a human quits.
    """
    state = GameState(board=Board(), current="R", last_status=TURN_LINES["R"])
    if stats is not None:
        stats.start_game(mode)

    while True:
        render(state.board, state.last_status)

        if draw(state.board):
            return _finish(state, mode, stats, "draw", DRAW_LINE)

        player: Player = state.current
        agent = agent_r if player == "R" else agent_y

        try:
            if is_human(agent):
                raw = input_fn(f"Player {1 if player == 'R' else 2} move: ")
                col = parse_column(raw, state.board.cols)
                if col is None:
                    render(state.board, "Game quit.")
                    logger.info("%s: game quit after %d moves", mode, state.moves)
                    return None
            else:
                if show_thinking:
                    ai_thinking(thinking_label(mode))
                col = agent.choose_move(state).column

            # Apply the move (works for BOTH human and AI)
            move = state.board.drop(col, player)

        except ValueError as e:
            state.last_status = f"{e}\n{TURN_LINES[player]}"
            continue

        state.moves += 1

        if winning(state.board, move, player):
            line = winning_line(state.board, move, player)
            return _finish(state, mode, stats, player, WIN_LINES[mode][player], line)

        state.current = other(player)
        state.last_status = _status_after(agent, player, move.column, state.current)


def _status_after(agent: Agent, player: Player, col: int, nxt: Player) -> str:
    who = "Computer" if not is_human(agent) else f"Player {1 if player == 'R' else 2}"
    status = f"{who} chose {col + 1}"

    # Show search stats if available
    info = getattr(agent, "last_info", None)
    if info and info.get("nodes"):
        status += f" | nodes={info.get('nodes')} | cut={info.get('cutoffs', 0)} | {info.get('time_ms')}ms"

    return f"{status}\n{TURN_LINES[nxt]}"


def _finish(
    state: GameState,
    mode: Mode,
    stats: Optional[Stats],
    outcome: Outcome,
    message: str,
    line=None,
) -> Outcome:
    render(state.board, message, highlight=line)
    logger.info("%s: game over after %d moves, outcome %s", mode, state.moves, outcome)
    if stats is not None:
        stats.record_result(mode, outcome)
    return outcome
