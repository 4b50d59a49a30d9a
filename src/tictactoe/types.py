# src/tictactoe/types.py

from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple


class Player(Enum):
    X = "X"
    O = "O"

    @property
    def marker(self) -> str:
        return self.value

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


Cell = Optional[Player]
Coord = Tuple[int, int]   # (row, col)
