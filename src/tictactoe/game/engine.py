from __future__ import annotations
from dataclasses import dataclass, field

from tictactoe.core.board import Board
from tictactoe.core import rules
from tictactoe.game.errors import GameOver, OutOfBounds, TileTaken
from tictactoe.game.results import BoardFull, Ongoing, Outcome, Won
from tictactoe.logging_config import get_logger
from tictactoe.types import Player

logger = get_logger(__name__)


@dataclass(slots=True)
class TicTacToe:
    """
    Game engine: owns the board and whose turn it is.

    `attempt_move` is the only mutation. Terminality is reported through the
    returned outcome; once one has been returned the engine refuses further
    moves with GameOver.
    """

    board: Board = field(default_factory=Board)
    turn: Player = Player.X
    finished: bool = False

    def has_won(self, player: Player) -> bool:
        return rules.has_won(self.board, player)

    def is_full(self) -> bool:
        return self.board.is_full()

    def render(self) -> str:
        return self.board.render()

    def attempt_move(self, row: int, col: int) -> Outcome:
        if self.finished:
            logger.info("Rejected move (%s, %s): game already over", row, col)
            raise GameOver()
        if not Board.in_bounds(row, col):
            logger.info("Rejected move (%s, %s) by %s: out of bounds", row, col, self.turn.marker)
            raise OutOfBounds(row, col)
        if self.board.get(row, col) is not None:
            logger.info("Rejected move (%s, %s) by %s: tile taken", row, col, self.turn.marker)
            raise TileTaken(row, col)

        self.board.place(row, col, self.turn)
        logger.debug("Player %s played (%s, %s)", self.turn.marker, row, col)

        # Turn is not advanced on a terminal outcome
        if self.has_won(self.turn):
            self.finished = True
            logger.debug("Player %s has won", self.turn.marker)
            return Won(self.turn)
        if self.is_full():
            self.finished = True
            logger.debug("Board full, draw")
            return BoardFull()

        self.turn = self.turn.opponent
        return Ongoing()

    def __str__(self) -> str:
        return self.render()
