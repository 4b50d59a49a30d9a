import pytest

from tictactoe.core.board import Board
from tictactoe.core.rules import (
    WINNING_LINES,
    check_winner,
    check_winner_with_line,
    has_won,
    is_draw,
)
from tictactoe.types import Player


def test_eight_winning_lines():
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8


def test_empty_board_no_winner():
    board = Board()
    assert not has_won(board, Player.X)
    assert not has_won(board, Player.O)
    assert check_winner(board) is None


def test_scattered_marks_no_winner(make_board):
    board = make_board(".X./..O/O..")
    assert not has_won(board, Player.X)
    assert not has_won(board, Player.O)


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_each_line_wins_for_its_owner_only(line, player):
    board = Board()
    for r, c in line:
        board.grid[r][c] = player
    assert has_won(board, player)
    assert not has_won(board, player.opponent)
    assert check_winner_with_line(board) == (player, list(line))


def test_mixed_line_is_not_a_win(make_board):
    board = make_board("XXO/.../...")
    assert not has_won(board, Player.X)
    assert not has_won(board, Player.O)


def test_anti_diagonal(make_board):
    board = make_board("..O/.O./O..")
    assert has_won(board, Player.O)
    assert not has_won(board, Player.X)


def test_both_players_can_win_on_unreachable_board(make_board):
    board = make_board("XXX/OOO/...")
    assert has_won(board, Player.X)
    assert has_won(board, Player.O)


def test_queries_are_idempotent(make_board):
    board = make_board("XOX/.X./O.X")
    first = (has_won(board, Player.X), has_won(board, Player.O), board.is_full())
    for _ in range(3):
        assert (has_won(board, Player.X), has_won(board, Player.O), board.is_full()) == first
    assert first == (True, False, False)


def test_is_draw(make_board):
    assert is_draw(make_board("XOX/XOO/OXX"))
    assert not is_draw(make_board("XOX/XO./OXX"))
    assert not is_draw(make_board("XXX/OOX/XOO"))
