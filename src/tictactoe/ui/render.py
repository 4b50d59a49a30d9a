from __future__ import annotations
from typing import Callable, Iterable, Optional, Set

from tictactoe import config
from tictactoe.core.board import Board, show_cell
from tictactoe.types import Cell, Coord, Player
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_RED, FG_YELLOW, REVERSE

CLEAR = "\033[2J\033[H"


def _piece(cell: Cell, color: bool) -> str:
    if cell is None:
        return " "
    return c(cell.marker, FG_RED if cell is Player.X else FG_YELLOW, color)


def clear_screen(write: Callable[..., None] = print, enabled: Optional[bool] = None) -> None:
    if config.CLEAR_SCREEN if enabled is None else enabled:
        write(CLEAR, end="")


def format_board(
    board: Board,
    highlight: Optional[Iterable[Coord]] = None,
    color: Optional[bool] = None,
) -> str:
    if color is None:
        color = config.USE_COLOR
    hl: Set[Coord] = set(highlight) if highlight else set()

    def show(pos: Coord, cell: Cell) -> str:
        if pos in hl:
            # reverse-video on the marker itself; plain text falls back to the marker
            return c(show_cell(cell), REVERSE, color)
        return _piece(cell, color)

    return board.render(show)


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    write: Callable[..., None] = print,
    color: Optional[bool] = None,
    clear: Optional[bool] = None,
) -> None:
    clear_screen(write, clear)
    if color is None:
        color = config.USE_COLOR

    write(c("TIC-TAC-TOE", BOLD, color))
    write(format_board(board, highlight, color), end="")
    if status:
        write(c(status, FG_CYAN, color))
    write(c("Enter row and column, e.g. 1 2. Enter q to quit.", DIM, color))
