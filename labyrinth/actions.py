"""Player command enumeration.

``MOVE_COMMANDS`` is the canonical ordered list of directional commands;
checks like ``if command in MOVE_COMMANDS`` are preferred over name
comparisons. ``COMMAND_DELTAS`` maps each of them to a unit ``(drow, dcol)``
step.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple


class Command(StrEnum):
    """String enum of Theseus commands.

    Members:
        UP, DOWN: Move along the row axis.
        LEFT, RIGHT: Move along the column axis.
        SKIP: Stay in place for one turn (the Minotaur still moves).
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SKIP = auto()


MOVE_COMMANDS = [Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT]

COMMAND_DELTAS: Dict[Command, Tuple[int, int]] = {
    Command.UP: (-1, 0),
    Command.DOWN: (1, 0),
    Command.LEFT: (0, -1),
    Command.RIGHT: (0, 1),
}
