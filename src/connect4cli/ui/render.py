from __future__ import annotations
import shutil
from typing import Optional, Iterable, Tuple, Set

from connect4cli.config import CLEAR_SCREEN, CONSOLE_WIDTH_FALLBACK
from connect4cli.core.board import Board
from connect4cli.types import Cell
from connect4cli.ui.colors import paint

Coord = Tuple[int, int]


def _piece(cell: Cell) -> str:
    if cell is None:
        return paint("·", "empty")
    if cell == "R":
        return paint("R", "red")
    return paint("Y", "yellow")


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def console_width() -> int:
    return shutil.get_terminal_size(fallback=(CONSOLE_WIDTH_FALLBACK, 24)).columns


def centered(text: str, width: Optional[int] = None, pad_only: bool = False) -> str:
    """
    Left-pad `text` so it sits in the middle of the console.
    With pad_only the text is a prompt, so trailing input room is left.
    """
    w = console_width() if width is None else width
    room = 5 if pad_only else 0
    padding = (w - len(text) - room) // 2
    return (" " * padding if padding > 0 else "") + text


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(paint(centered("CONNECT 4"), "title"))
    if status:
        for line in status.splitlines():
            print(paint(centered(line), "status"))
    else:
        print()

    nums = " ".join(str(i + 1) for i in range(board.cols))
    width = len(nums) + 4
    pad = " " * max(0, (console_width() - width) // 2)
    print(pad + paint("  " + nums, "hint"))

    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = paint(p, "win")
            parts.append(p)
        print(pad + "| " + " ".join(parts) + " |")

    print(pad + paint("  " + "—" * (2 * board.cols - 1), "hint"))
    print(pad + paint("  Enter 1-7 to drop. Enter q to quit.", "hint"))
