from labyrinth.grid import Grid
from labyrinth.render import render_board, render_line, render_lines


def test_render_line_replaces_walls_only() -> None:
    assert render_line("XT M?G X") == "█T M?G █"


def test_render_lines_keeps_ragged_rows() -> None:
    grid = Grid.from_lines(["XXX", "XT", "X MG"])
    assert render_lines(grid) == ["███", "█T", "█ MG"]


def test_render_board_custom_glyph() -> None:
    grid = Grid.from_lines(["XXX", "XTX"])
    assert render_board(grid, wall_glyph="#") == "###\n#T#\n"


def test_render_empty_grid() -> None:
    assert render_board(Grid.from_lines([])) == ""
