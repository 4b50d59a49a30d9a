from tictactoe.core.board import Board
from tictactoe.types import Player
from tictactoe.ui.colors import REVERSE, c
from tictactoe.ui.render import CLEAR, format_board, render


class Capture:
    def __init__(self):
        self.out = []

    def __call__(self, *args, end="\n"):
        self.out.append(" ".join(str(a) for a in args) + end)

    @property
    def text(self):
        return "".join(self.out)


def test_plain_format_matches_board_render(make_board):
    board = make_board("X.O/.X./...")
    assert format_board(board, color=False) == board.render()


def test_highlight_without_color_is_plain(make_board):
    board = make_board("XXX/OO./...")
    assert format_board(board, highlight=[(0, 0), (0, 1), (0, 2)], color=False) == board.render()


def test_highlight_with_color_wraps_cells(make_board):
    board = make_board("XXX/OO./...")
    out = format_board(board, highlight=[(0, 0), (0, 1), (0, 2)], color=True)
    assert out.splitlines()[1].count(c("X", REVERSE, True)) == 3


def test_render_clears_and_prints_status():
    cap = Capture()
    render(Board(), "Player X starts.", write=cap, color=False, clear=True)
    assert cap.text.startswith(CLEAR)
    assert "Player X starts." in cap.text
    assert Board().render() in cap.text


def test_render_without_clear():
    cap = Capture()
    board = Board()
    board.place(0, 0, Player.O)
    render(board, write=cap, color=False, clear=False)
    assert CLEAR not in cap.text
    assert "┃ O ┃   ┃   ┃" in cap.text
