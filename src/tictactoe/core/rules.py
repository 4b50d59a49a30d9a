from __future__ import annotations
from typing import List, Optional, Tuple

from tictactoe.core.board import Board
from tictactoe.types import Coord, Player

WINNING_LINES: Tuple[Tuple[Coord, Coord, Coord], ...] = (
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def _owns_line(board: Board, line: Tuple[Coord, ...], player: Player) -> bool:
    return all(board.grid[r][c] is player for r, c in line)


def has_won(board: Board, player: Player) -> bool:
    return any(_owns_line(board, line, player) for line in WINNING_LINES)


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    for line in WINNING_LINES:
        r, c = line[0]
        p = board.grid[r][c]
        if p is not None and _owns_line(board, line, p):
            return p, list(line)
    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
