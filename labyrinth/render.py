"""Text rendering of a board.

Walls are drawn with a solid block so the maze outline reads at a glance;
every other cell is printed as stored, markers included.
"""

from typing import List

from labyrinth.grid import Grid
from labyrinth.types import Tile

WALL_GLYPH = "█"


def render_line(line: str, wall_glyph: str = WALL_GLYPH) -> str:
    """Render one board row."""
    return "".join(wall_glyph if char == Tile.WALL else char for char in line)


def render_lines(grid: Grid, wall_glyph: str = WALL_GLYPH) -> List[str]:
    """Render every row of ``grid``; one string per row, no newlines."""
    return [render_line(line, wall_glyph) for line in grid.lines()]


def render_board(grid: Grid, wall_glyph: str = WALL_GLYPH) -> str:
    """Render ``grid`` as newline separated text (trailing newline included)."""
    return "".join(f"{line}\n" for line in render_lines(grid, wall_glyph))
