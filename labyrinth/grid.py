from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from labyrinth.errors import OutOfBounds
from labyrinth.types import Tile


@dataclass
class Grid:
    """
    Character board addressed by (row, col).
    - `rows[row][col]` is the symbol at that cell; rows may differ in length.
    - Rows are persistent vectors, so `copy()` is O(1) and a copy never sees
      later relocations on the original.
    - The grid does not know where the markers are. `labyrinth.game.Game` keeps
      that cache and is the only caller of `relocate`.
    """

    rows: PVector[PVector[str]]

    @classmethod
    def from_lines(cls, lines: Iterable[Iterable[str]]) -> "Grid":
        """
        Build a grid from rows of characters (strings or character lists).
        """
        return cls(pvector(pvector(line) for line in lines))

    # -------- Tile queries --------

    def tile(self, row: int, col: int) -> str:
        self._check_bounds(row, col)
        return self.rows[row][col]

    def is_wall(self, row: int, col: int) -> bool:
        return self.tile(row, col) == Tile.WALL

    def is_empty(self, row: int, col: int) -> bool:
        return self.tile(row, col) == Tile.EMPTY

    def is_theseus(self, row: int, col: int) -> bool:
        return self.tile(row, col) == Tile.THESEUS

    def is_minotaur(self, row: int, col: int) -> bool:
        return self.tile(row, col) == Tile.MINOTAUR

    def is_goal(self, row: int, col: int) -> bool:
        return self.tile(row, col) == Tile.GOAL

    # -------- Editing --------

    def relocate(
        self,
        symbol: str,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
        vacated: str = Tile.EMPTY,
    ) -> None:
        """
        Write `vacated` (empty floor by default) into the source cell and
        `symbol` into the destination cell. Neither cell's previous content is
        checked. Both cells are bounds-checked before anything is written.
        """
        self._check_bounds(from_row, from_col)
        self._check_bounds(to_row, to_col)
        rows = self.rows.set(from_row, self.rows[from_row].set(from_col, vacated))
        self.rows = rows.set(to_row, rows[to_row].set(to_col, symbol))

    # -------- Shape --------

    @property
    def height(self) -> int:
        return len(self.rows)

    def row_width(self, row: int) -> int:
        if not 0 <= row < len(self.rows):
            raise OutOfBounds(row, 0)
        return len(self.rows[row])

    def lines(self) -> List[str]:
        """
        Return the rows as plain strings, exactly as stored.
        """
        return ["".join(row) for row in self.rows]

    def copy(self) -> "Grid":
        return Grid(self.rows)

    # -------- Internal helpers --------

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < len(self.rows) and 0 <= col < len(self.rows[row])):
            raise OutOfBounds(row, col)
