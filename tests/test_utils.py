from typing import Iterable, List, Tuple

from labyrinth.game import Game
from labyrinth.grid import Grid
from labyrinth.types import Position


def board(*rows: str) -> str:
    """Join rows into board text."""
    return "\n".join(rows)


def make_game(*rows: str) -> Game:
    """Standard game from board rows for tests."""
    return Game.from_board(board(*rows))


def open_grid(
    height: int, width: int, walls: Iterable[Tuple[int, int]] = ()
) -> Grid:
    """Rectangular grid of empty floor with walls at the given (row, col) cells."""
    cells: List[List[str]] = [[" "] * width for _ in range(height)]
    for row, col in walls:
        cells[row][col] = "X"
    return Grid.from_lines(cells)


def cells_where(grid: Grid, symbol: str) -> List[Position]:
    """Every position whose cell holds ``symbol``, in reading order."""
    return [
        Position(row, col)
        for row, line in enumerate(grid.lines())
        for col, char in enumerate(line)
        if char == symbol
    ]


def assert_markers_consistent(game: Game) -> None:
    """Grid marker cells agree with the cached positions of a running game."""
    assert cells_where(game.grid, "T") == [game.theseus]
    assert cells_where(game.grid, "M") == [game.minotaur]
    if game.minotaur == game.goal:
        assert cells_where(game.grid, "G") == []
    else:
        assert cells_where(game.grid, "G") == [game.goal]
