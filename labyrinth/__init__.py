"""labyrinth
=========

Turn-based pursuit puzzle: Theseus must reach the goal tile while the
Minotaur closes in one greedy step per turn.

Public surface::

    from labyrinth import Game, Command, GameStatus

    game = Game.from_board(text)
    game.theseus_move(Command.RIGHT)
    game.minotaur_move()
    game.status()

Construction errors are :class:`~labyrinth.errors.BoardError` subclasses.
"""

from .actions import Command, MOVE_COMMANDS
from .errors import (
    BoardError,
    InvalidCharacter,
    InvalidSize,
    MultipleGoal,
    MultipleMinotaur,
    MultipleTheseus,
    NoGoal,
    NoMinotaur,
    NoTheseus,
    OutOfBounds,
)
from .game import Game
from .grid import Grid
from .pursuit import PURSUIT_FN_REGISTRY, column_first_pursuit_fn, greedy_pursuit_fn
from .types import GameStatus, Position, Tile

__all__ = [
    "BoardError",
    "Command",
    "Game",
    "GameStatus",
    "Grid",
    "InvalidCharacter",
    "InvalidSize",
    "MOVE_COMMANDS",
    "MultipleGoal",
    "MultipleMinotaur",
    "MultipleTheseus",
    "NoGoal",
    "NoMinotaur",
    "NoTheseus",
    "OutOfBounds",
    "PURSUIT_FN_REGISTRY",
    "Position",
    "Tile",
    "column_first_pursuit_fn",
    "greedy_pursuit_fn",
]
