"""Shared fixtures for building boards by hand."""

import pytest

from tictactoe.core.board import Board
from tictactoe.types import Player

_CELLS = {"X": Player.X, "O": Player.O, ".": None, " ": None}


def board_from(rows: str) -> Board:
    """Build a board from "XOX/.O./..." notation."""
    return Board([[_CELLS[ch] for ch in row] for row in rows.split("/")])


@pytest.fixture
def make_board():
    return board_from
