"""Board text parsing and validation.

Turns authored board text into a :class:`~labyrinth.grid.Grid` plus the single
position of each marker. The scan runs in reading order and stops at the first
violation:

1. A second Theseus, Minotaur or Goal raises the matching ``Multiple*`` error
   as soon as it is seen.
2. In strict mode a character outside :class:`~labyrinth.types.Tile` raises
   :class:`~labyrinth.errors.InvalidCharacter`. Lenient mode (the default)
   stores such characters verbatim; they are neither walls nor markers.
3. After the scan, a missing marker raises ``NoTheseus``, ``NoMinotaur`` or
   ``NoGoal``, checked in that order.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Type

from labyrinth.errors import (
    BoardError,
    InvalidCharacter,
    MultipleGoal,
    MultipleMinotaur,
    MultipleTheseus,
    NoGoal,
    NoMinotaur,
    NoTheseus,
)
from labyrinth.grid import Grid
from labyrinth.types import MARKERS, Position, Tile

logger = logging.getLogger(__name__)

ALPHABET = frozenset(tile.value for tile in Tile)

_MULTIPLE_ERRORS: Dict[Tile, Type[BoardError]] = {
    Tile.THESEUS: MultipleTheseus,
    Tile.MINOTAUR: MultipleMinotaur,
    Tile.GOAL: MultipleGoal,
}

_MISSING_ERRORS: Dict[Tile, Type[BoardError]] = {
    Tile.THESEUS: NoTheseus,
    Tile.MINOTAUR: NoMinotaur,
    Tile.GOAL: NoGoal,
}


@dataclass(frozen=True)
class ParsedBoard:
    """Result of a successful parse.

    Attributes:
        grid: Rows as authored.
        theseus: Position of the single Theseus marker.
        minotaur: Position of the single Minotaur marker.
        goal: Position of the single Goal marker.
    """

    grid: Grid
    theseus: Position
    minotaur: Position
    goal: Position


def split_rows(text: str) -> List[str]:
    """Split board text into rows.

    Only ``"\\n"`` separates rows; a trailing ``"\\r"`` is dropped from each row
    and a final newline does not add an empty row.
    """
    if not text:
        return []
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return [row[:-1] if row.endswith("\r") else row for row in rows]


def parse_board(text: str, strict: bool = False) -> ParsedBoard:
    """Parse and validate board text.

    Args:
        text (str): Newline separated rows of board characters.
        strict (bool): Reject characters outside the board alphabet.

    Returns:
        ParsedBoard: Grid plus the position of every marker.

    Raises:
        BoardError: The first violation found (see module docstring).
    """
    markers: Dict[Tile, Optional[Position]] = {marker: None for marker in MARKERS}
    rows = split_rows(text)

    for row, line in enumerate(rows):
        for col, char in enumerate(line):
            if strict and char not in ALPHABET:
                raise InvalidCharacter(char, Position(row, col))
            if char not in ALPHABET:
                continue
            tile = Tile(char)
            if tile not in markers:
                continue
            if markers[tile] is not None:
                raise _MULTIPLE_ERRORS[tile]()
            markers[tile] = Position(row, col)

    for marker in MARKERS:
        if markers[marker] is None:
            raise _MISSING_ERRORS[marker]()

    theseus, minotaur, goal = (markers[marker] for marker in MARKERS)
    assert theseus is not None and minotaur is not None and goal is not None

    logger.debug(
        "Parsed board with %d rows (widest %d)",
        len(rows),
        max((len(line) for line in rows), default=0),
    )
    return ParsedBoard(
        grid=Grid.from_lines(rows), theseus=theseus, minotaur=minotaur, goal=goal
    )
