from __future__ import annotations
from typing import Callable, Optional

from connect4cli.ui.render import centered

QUIT_WORDS = {"q", "quit", "exit"}


def parse_column(raw: str, cols: int) -> Optional[int]:
    """
    Turn a 1-based column typed by the player into a 0-based index.
    Returns None when the player asks to quit.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return col


def parse_int_range(raw: str, low: int, high: int) -> int:
    s = raw.strip()
    try:
        value = int(s)
    except ValueError:
        raise ValueError("Invalid input.") from None
    if value < low or value > high:
        raise ValueError("Input out of range.")
    return value


def read_int_range(
    low: int,
    high: int,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> int:
    prompt = centered(f"Please select an option ({low}-{high}): ", pad_only=True)
    while True:
        try:
            return parse_int_range(input_fn(prompt), low, high)
        except ValueError as e:
            print_fn(centered(str(e)))
            prompt = centered(f"Please enter a number ({low}-{high}): ", pad_only=True)


def press_enter(input_fn: Callable[[str], str] = input) -> None:
    input_fn(centered("Press Enter to return to main menu..."))
