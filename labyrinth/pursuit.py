"""Built-in Minotaur pursuit functions.

Each *pursuit function* maps (grid, minotaur position, theseus position) to the
position the Minotaur occupies after its turn. Returning the current position
means the Minotaur waits. The game applies the result; these functions never
mutate the grid.

Contract (``PursuitFn``):

* Moves at most one tile, along one axis (never diagonally).
* Never returns a wall cell.
* Deterministic: same inputs, same result.

Both built-ins close the column distance before the row distance. They differ
only when the column step is blocked by a wall while Theseus is still in
another column:

* ``greedy_pursuit_fn`` then tries the row axis.
* ``column_first_pursuit_fn`` waits.
"""

import logging
from typing import Dict

from labyrinth.grid import Grid
from labyrinth.types import Position, PursuitFn

logger = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _column_step(grid: Grid, minotaur: Position, theseus: Position) -> Position:
    """Step towards Theseus along the column axis, or stay if blocked."""
    target = minotaur.offset(0, _sign(theseus.col - minotaur.col))
    if grid.is_wall(target.row, target.col):
        return minotaur
    return target


def _row_step(grid: Grid, minotaur: Position, theseus: Position) -> Position:
    """Step towards Theseus along the row axis, or stay if blocked."""
    target = minotaur.offset(_sign(theseus.row - minotaur.row), 0)
    if grid.is_wall(target.row, target.col):
        return minotaur
    return target


def greedy_pursuit_fn(grid: Grid, minotaur: Position, theseus: Position) -> Position:
    """Column step if possible, otherwise row step.

    The row axis is tried when the columns are already aligned or when the
    column step is blocked by a wall.
    """
    if theseus.col != minotaur.col:
        target = _column_step(grid, minotaur, theseus)
        if target != minotaur:
            return target
        logger.debug("Minotaur column step blocked at %s", minotaur)
    if theseus.row != minotaur.row:
        return _row_step(grid, minotaur, theseus)
    return minotaur


def column_first_pursuit_fn(
    grid: Grid, minotaur: Position, theseus: Position
) -> Position:
    """Column step while the columns differ; row step only once aligned.

    A wall in the way of the column step makes the Minotaur wait.
    """
    if theseus.col != minotaur.col:
        return _column_step(grid, minotaur, theseus)
    if theseus.row != minotaur.row:
        return _row_step(grid, minotaur, theseus)
    return minotaur


PURSUIT_FN_REGISTRY: Dict[str, PursuitFn] = {
    "greedy": greedy_pursuit_fn,
    "column-first": column_first_pursuit_fn,
}
"""Name -> pursuit function mapping for game configuration."""
