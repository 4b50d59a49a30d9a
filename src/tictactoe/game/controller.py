from __future__ import annotations
from typing import Callable, Optional

from tictactoe.core.rules import check_winner_with_line
from tictactoe.game.engine import TicTacToe
from tictactoe.game.results import BoardFull, Ongoing, Outcome, Won
from tictactoe.logging_config import get_logger
from tictactoe.ui.prompts import parse_move
from tictactoe.ui.render import render

logger = get_logger(__name__)


def run_game(
    game: Optional[TicTacToe] = None,
    read_line: Callable[[str], str] = input,
    write: Callable[..., None] = print,
    color: Optional[bool] = None,
    clear: Optional[bool] = None,
) -> Optional[Outcome]:
    """
    Play one game in the terminal until it ends or the player quits.

    Returns the terminal outcome, or None if the player quit (or input ran out).
    """
    game = game if game is not None else TicTacToe()
    status = f"Player {game.turn.marker} starts."
    logger.debug("Session started")

    def show(message: str, highlight=None) -> None:
        render(game.board, message, highlight=highlight, write=write, color=color, clear=clear)

    while True:
        show(status)

        try:
            raw = read_line(f"Player to move: {game.turn.marker} ")
        except EOFError:
            raw = "q"

        try:
            move = parse_move(raw)
            if move is None:
                show("Game quit.")
                logger.debug("Session quit by player")
                return None

            row, col = move
            mover = game.turn
            outcome = game.attempt_move(row, col)
        except ValueError as e:
            # MoveError and parse errors both: show and re-prompt
            status = str(e)
            continue

        if isinstance(outcome, Ongoing):
            status = f"Player {mover.marker} played {row} {col}."
            continue

        if isinstance(outcome, Won):
            line = check_winner_with_line(game.board)
            show(f"Game over! Player {outcome.player.marker} has won!", highlight=line[1] if line else None)
        elif isinstance(outcome, BoardFull):
            show("Game over! It's a draw")

        logger.debug("Session ended: %s", outcome)
        return outcome
