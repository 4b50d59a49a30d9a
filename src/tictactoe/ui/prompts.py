from __future__ import annotations
import string
from typing import Optional

from tictactoe.types import Coord

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str) -> Optional[Coord]:
    """
    Parse "<row><sep><col>" (e.g. "1 2", "0,2") into (row, col).

    Returns None when the player wants to quit. Digits outside the board
    are returned as-is so the engine can report them as out of bounds.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if len(s) != 3 or s[0] not in string.digits or s[2] not in string.digits or s[1] in string.digits:
        raise ValueError("Invalid input. Enter row and column like 1 2, or q.")
    return int(s[0]), int(s[2])
