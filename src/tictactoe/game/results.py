from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from tictactoe.types import Player


@dataclass(frozen=True, slots=True)
class Won:
    player: Player

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class BoardFull:
    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Ongoing:
    @property
    def is_terminal(self) -> bool:
        return False


Outcome = Union[Won, BoardFull, Ongoing]
