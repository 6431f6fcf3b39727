from __future__ import annotations
from typing import Dict

from connect4cli.config import USE_COLOR

RESET = "\033[0m"

# Display roles -> SGR parameters.
PALETTE: Dict[str, str] = {
    "red": "31",
    "yellow": "33",
    "empty": "90",
    "title": "1",
    "status": "36",
    "hint": "2",
    "win": "7",
    "heading": "1;36",
}


def paint(text: str, role: str, enabled: bool = USE_COLOR) -> str:
    """Wrap text in the escape sequence for a display role; unknown roles raise KeyError."""
    code = PALETTE[role]
    if not enabled:
        return text
    return f"\033[{code}m{text}{RESET}"


def rule(width: int = 72, char: str = "─") -> str:
    return char * width
