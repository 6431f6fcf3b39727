from __future__ import annotations

import logging
from typing import Callable, Optional

from connect4cli.ai.pick import agent_for
from connect4cli.game.controller import run_game
from connect4cli.game.stats import Stats
from connect4cli.types import Difficulty
from connect4cli.ui.human import HumanAgent
from connect4cli.ui.prompts import press_enter, read_int_range
from connect4cli.ui.render import centered, clear_screen

logger = logging.getLogger(__name__)

MAIN_MENU = [
    "=== Connect 4 ===",
    "1. Player vs Player",
    "2. Player vs Computer",
    "3. Statistics",
    "4. Exit",
]

DIFFICULTY_MENU = [
    "Starting Player vs Computer",
    "Choose Difficulty",
    "1. Easy",
    "2. Medium",
    "3. Hard",
    "4. Back to menu",
]

DIFFICULTY_CHOICES: dict[int, Difficulty] = {1: "easy", 2: "medium", 3: "hard"}


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(centered(line))
    print()


def _play_vs_computer(
    difficulty: Difficulty,
    stats: Stats,
    seed: Optional[int],
    input_fn: Callable[[str], str],
) -> None:
    clear_screen()
    print(centered(f"Starting Player vs Computer - {difficulty.capitalize()} Difficulty"))
    if difficulty == "hard":
        print(centered("Warning: This AI is very challenging!"))
    print()
    run_game(HumanAgent("Player 1"), agent_for(difficulty, seed), mode=difficulty, stats=stats, input_fn=input_fn)
    press_enter(input_fn)


def run_menu(stats: Stats, seed: Optional[int] = None, input_fn: Callable[[str], str] = input) -> None:
    """Main menu loop; returns when the player picks Exit."""
    while True:
        _print_lines(MAIN_MENU)
        choice = read_int_range(1, 4, input_fn)

        if choice == 1:
            clear_screen()
            print(centered("Starting Player vs Player"))
            print()
            run_game(HumanAgent("Player 1"), HumanAgent("Player 2"), mode="pvp", stats=stats, input_fn=input_fn)
            press_enter(input_fn)
            clear_screen()

        elif choice == 2:
            clear_screen()
            _print_lines(DIFFICULTY_MENU)
            diff = read_int_range(1, 4, input_fn)
            if diff in DIFFICULTY_CHOICES:
                _play_vs_computer(DIFFICULTY_CHOICES[diff], stats, seed, input_fn)
            clear_screen()

        elif choice == 3:
            clear_screen()
            _print_lines(stats.lines())
            press_enter(input_fn)
            clear_screen()

        else:
            clear_screen()
            print(centered("Thanks for playing!"))
            print(centered("Goodbye!"))
            logger.info("exit from main menu")
            return
