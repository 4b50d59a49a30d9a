# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from tictactoe.config import BOARD_SIZE
from tictactoe.types import Cell, Coord, Player

TOP = "┏━━━┳━━━┳━━━┓"
MIDDLE = "┣━━━╋━━━╋━━━┫"
BOTTOM = "┗━━━┻━━━┻━━━┛"
SIDE = "┃"


def show_cell(cell: Cell) -> str:
    return " " if cell is None else cell.marker


@dataclass(slots=True)
class Board:
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
            return
        if len(self.grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.grid):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}.")
        # Rows are copied so a hand-built grid is never aliased
        self.grid = [list(row) for row in self.grid]

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def copy(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def get(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def place(self, row: int, col: int, player: Player) -> None:
        if not self.in_bounds(row, col):
            raise ValueError("Tile out of bounds!")
        if self.grid[row][col] is not None:
            raise ValueError("Tile already taken!")
        self.grid[row][col] = player

    def empty_cells(self) -> List[Coord]:
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self.grid[r][c] is None
        ]

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def render(self, show: Optional[Callable[[Coord, Cell], str]] = None) -> str:
        """
        Boxed text of the grid, one line per newline-terminated row.

        `show` formats a single cell; the UI passes one that adds colour
        and highlighting. The default is the plain marker or a space.
        """
        lines = [TOP]
        for r in range(BOARD_SIZE):
            cells = [
                show((r, c), self.grid[r][c]) if show else show_cell(self.grid[r][c])
                for c in range(BOARD_SIZE)
            ]
            lines.append(SIDE + SIDE.join(f" {s} " for s in cells) + SIDE)
            if r != BOARD_SIZE - 1:
                lines.append(MIDDLE)
        lines.append(BOTTOM)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
