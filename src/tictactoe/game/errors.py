from __future__ import annotations


class MoveError(ValueError):
    """A move the engine refused. The board and turn are left untouched."""


class OutOfBounds(MoveError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__("Tile out of bounds!")
        self.row = row
        self.col = col


class TileTaken(MoveError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__("Tile already taken!")
        self.row = row
        self.col = col


class GameOver(MoveError):
    def __init__(self) -> None:
        super().__init__("Game is already over!")
