import pytest

from tictactoe.ui.prompts import parse_move


@pytest.mark.parametrize("raw, expected", [
    ("0 0", (0, 0)),
    ("1,2", (1, 2)),
    ("2-1", (2, 1)),
    ("  1 1\n", (1, 1)),
    ("3 0", (3, 0)),
    ("9 9", (9, 9)),
])
def test_parses_digit_separator_digit(raw, expected):
    assert parse_move(raw) == expected


@pytest.mark.parametrize("raw", ["q", "Q", "quit", "exit", " q \n"])
def test_quit_words(raw):
    assert parse_move(raw) is None


@pytest.mark.parametrize("raw", ["", "\n", "1", "12", "1 ", "a b", "1 b", "123", "1  2", "10 2"])
def test_malformed_input_raises(raw):
    with pytest.raises(ValueError):
        parse_move(raw)
