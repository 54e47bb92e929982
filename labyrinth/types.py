"""Common value types and enumerations.

``Tile`` is the closed board alphabet; any other character survives lenient
parsing verbatim but is never treated as one of these kinds. ``PursuitFn`` is
the extension point used by :class:`labyrinth.game.Game` to decide where the
Minotaur steps each turn.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration for PursuitFn typing to avoid circular imports:
if TYPE_CHECKING:
    from labyrinth.grid import Grid


class Tile(StrEnum):
    """Board symbols as they appear in board text."""

    WALL = "X"
    EMPTY = " "
    THESEUS = "T"
    MINOTAUR = "M"
    GOAL = "G"


MARKERS = (Tile.THESEUS, Tile.MINOTAUR, Tile.GOAL)


class GameStatus(StrEnum):
    """Outcome of the current turn."""

    WIN = auto()
    LOSE = auto()
    CONTINUE = auto()


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, drow: int, dcol: int) -> "Position":
        """Return the position shifted by ``(drow, dcol)``."""
        return Position(self.row + drow, self.col + dcol)


PursuitFn = Callable[["Grid", Position, Position], Position]
