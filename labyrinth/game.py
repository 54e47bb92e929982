"""Game state and turn operations.

:class:`Game` owns a :class:`~labyrinth.grid.Grid` and a cache of the three
marker positions. The cache answers "where is X" (movement deltas and status);
the grid answers what occupies a cell (walls, empty floor). The two are kept in
lock-step: the only writer of either is :meth:`Game._relocate`, which updates
the grid cell and the cached position together.

A turn, as driven by :mod:`labyrinth.cli`, is::

    game.theseus_move(command)
    game.minotaur_move()
    game.status()

Moves into walls are ordinary no-ops. Moving off the edge of a board that is
not enclosed by walls raises :class:`~labyrinth.errors.OutOfBounds` before any
state changes.
"""

import logging
import sys
from typing import Optional, TextIO

from labyrinth.actions import COMMAND_DELTAS, Command
from labyrinth.board import parse_board
from labyrinth.grid import Grid
from labyrinth.pursuit import greedy_pursuit_fn
from labyrinth.render import WALL_GLYPH, render_board
from labyrinth.status import evaluate_status, is_terminal_status
from labyrinth.types import GameStatus, Position, PursuitFn, Tile

logger = logging.getLogger(__name__)


class Game:
    """Theseus and the Minotaur on a single board.

    Prefer :meth:`from_board`; the constructor trusts that the given positions
    match the marker cells of ``grid``.

    Attributes:
        grid (Grid): Board cells (walls, floor, markers).
        pursuit_fn (PursuitFn): Decides the Minotaur's step each turn.
    """

    def __init__(
        self,
        grid: Grid,
        theseus: Position,
        minotaur: Position,
        goal: Position,
        pursuit_fn: PursuitFn = greedy_pursuit_fn,
    ) -> None:
        self.grid = grid
        self.pursuit_fn = pursuit_fn
        self._theseus = theseus
        self._minotaur = minotaur
        self._goal = goal

    @classmethod
    def from_board(
        cls,
        board: str,
        *,
        strict: bool = False,
        pursuit_fn: PursuitFn = greedy_pursuit_fn,
    ) -> "Game":
        """Build a game from board text.

        Args:
            board (str): Newline separated rows using ``X`` (wall), space,
                ``T``, ``M`` and ``G``.
            strict (bool): Reject any other character instead of keeping it.
            pursuit_fn (PursuitFn): Minotaur movement rule.

        Returns:
            Game: A game whose cache matches the single cell of each marker.

        Raises:
            BoardError: The first structural violation in the board.
        """
        parsed = parse_board(board, strict=strict)
        return cls(
            parsed.grid,
            parsed.theseus,
            parsed.minotaur,
            parsed.goal,
            pursuit_fn=pursuit_fn,
        )

    # -------- Cached positions --------

    @property
    def theseus(self) -> Position:
        return self._theseus

    @property
    def minotaur(self) -> Position:
        return self._minotaur

    @property
    def goal(self) -> Position:
        return self._goal

    # -------- Moves --------

    def theseus_move(self, command: Command) -> bool:
        """Apply a player command.

        ``SKIP`` does nothing. A directional command moves Theseus one tile
        unless the destination is a wall.

        Returns:
            bool: True if Theseus changed cells.
        """
        if command == Command.SKIP:
            return False
        drow, dcol = COMMAND_DELTAS[command]
        target = self._theseus.offset(drow, dcol)
        if self.grid.is_wall(target.row, target.col):
            logger.debug("Theseus blocked moving %s into %s", command, target)
            return False
        self._theseus = self._relocate(Tile.THESEUS, self._theseus, target)
        return True

    def minotaur_move(self) -> bool:
        """Advance the Minotaur by one pursuit step.

        Returns:
            bool: True if the Minotaur changed cells.
        """
        target = self.pursuit_fn(self.grid, self._minotaur, self._theseus)
        if target == self._minotaur:
            return False
        logger.debug("Minotaur moves %s -> %s", self._minotaur, target)
        self._minotaur = self._relocate(Tile.MINOTAUR, self._minotaur, target)
        return True

    def _relocate(self, symbol: Tile, source: Position, target: Position) -> Position:
        # A cell shows one symbol; whatever it hid reappears once the mover leaves.
        if symbol == Tile.THESEUS and source == self._minotaur:
            vacated = Tile.MINOTAUR
        elif symbol == Tile.MINOTAUR and source == self._theseus:
            vacated = Tile.THESEUS
        elif source == self._goal:
            vacated = Tile.GOAL
        else:
            vacated = Tile.EMPTY
        self.grid.relocate(
            symbol, source.row, source.col, target.row, target.col, vacated
        )
        return target

    # -------- Status --------

    def status(self) -> GameStatus:
        return evaluate_status(self._theseus, self._minotaur, self._goal)

    def is_over(self) -> bool:
        return is_terminal_status(self.status())

    # -------- Grid queries --------

    def is_theseus(self, row: int, col: int) -> bool:
        return self.grid.is_theseus(row, col)

    def is_minotaur(self, row: int, col: int) -> bool:
        return self.grid.is_minotaur(row, col)

    def is_wall(self, row: int, col: int) -> bool:
        return self.grid.is_wall(row, col)

    def is_goal(self, row: int, col: int) -> bool:
        return self.grid.is_goal(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid.is_empty(row, col)

    # -------- Rendering --------

    def render(self, wall_glyph: str = WALL_GLYPH) -> str:
        return render_board(self.grid, wall_glyph)

    def show(self, file: Optional[TextIO] = None, wall_glyph: str = WALL_GLYPH) -> None:
        """Print the board, one row per line, walls drawn as ``wall_glyph``."""
        out = file if file is not None else sys.stdout
        out.write(self.render(wall_glyph))

    # -------- Value semantics --------

    def copy(self) -> "Game":
        """Return an independent game in the same state."""
        return Game(
            self.grid.copy(),
            self._theseus,
            self._minotaur,
            self._goal,
            pursuit_fn=self.pursuit_fn,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return (
            self.grid == other.grid
            and self._theseus == other._theseus
            and self._minotaur == other._minotaur
            and self._goal == other._goal
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Game(theseus={self._theseus}, minotaur={self._minotaur}, "
            f"goal={self._goal}, status={self.status()})"
        )
