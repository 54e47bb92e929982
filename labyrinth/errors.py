"""Board error taxonomy.

Every failure of :meth:`labyrinth.game.Game.from_board` is a subclass of
:class:`BoardError` (itself a ``ValueError``), so callers can catch the whole
family or a single kind. Messages follow the short display strings players see
on the command line.

:class:`OutOfBounds` is not a board error: it is raised at play time when a
grid query falls outside the authored rows, which only happens on boards that
are not enclosed by walls.
"""

from typing import Optional

from labyrinth.types import Position


class BoardError(ValueError):
    """Base class for board construction failures."""

    message = "Invalid board"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class InvalidCharacter(BoardError):
    """A character outside the board alphabet (strict parsing only)."""

    def __init__(self, char: str, position: Optional[Position] = None) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Invalid character: {char}")


class InvalidSize(BoardError):
    """Reserved for board size violations; nothing raises it yet."""

    message = "Invalid size"


class NoMinotaur(BoardError):
    message = "No minotaur"


class NoTheseus(BoardError):
    message = "No theseus"


class NoGoal(BoardError):
    message = "No goal"


class MultipleMinotaur(BoardError):
    message = "Multiple minotaur"


class MultipleTheseus(BoardError):
    message = "Multiple theseus"


class MultipleGoal(BoardError):
    message = "Multiple goal"


class OutOfBounds(IndexError):
    """Grid access outside the board."""

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"Out of bounds: {(row, col)}")
