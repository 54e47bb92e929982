from typing import List, Type

import pytest

from labyrinth.board import parse_board, split_rows
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
from labyrinth.levels import LEVEL_REGISTRY
from labyrinth.types import Position
from tests.test_utils import board, cells_where


def test_minimal_single_row_board() -> None:
    parsed = parse_board("TM G")
    assert parsed.theseus == Position(0, 0)
    assert parsed.minotaur == Position(0, 1)
    assert parsed.goal == Position(0, 3)
    assert parsed.grid.lines() == ["TM G"]


def test_minimal_multi_row_board() -> None:
    parsed = parse_board(board("T", " M", "  G"))
    assert parsed.theseus == Position(0, 0)
    assert parsed.minotaur == Position(1, 1)
    assert parsed.goal == Position(2, 2)
    assert [parsed.grid.row_width(row) for row in range(3)] == [1, 2, 3]


@pytest.mark.parametrize(
    "text, error",
    [
        ("TTM G", MultipleTheseus),
        ("TMM G", MultipleMinotaur),
        ("TMGG", MultipleGoal),
        ("M G", NoTheseus),
        ("T G", NoMinotaur),
        ("TM  ", NoGoal),
        ("", NoTheseus),
        (board("XXXX", "XTMX", "XXXX"), NoGoal),
        (board("T", "M", "G", "T"), MultipleTheseus),
    ],
)
def test_board_errors(text: str, error: Type[BoardError]) -> None:
    with pytest.raises(error):
        parse_board(text)


def test_multiple_marker_kinds_are_distinct() -> None:
    raised: List[Type[BoardError]] = []
    for text in ("TTMG", "TMMG", "TMGG"):
        with pytest.raises(BoardError) as info:
            parse_board(text)
        raised.append(type(info.value))
    assert raised == [MultipleTheseus, MultipleMinotaur, MultipleGoal]


def test_first_violation_in_reading_order_wins() -> None:
    # The second goal is read before the second theseus.
    with pytest.raises(MultipleGoal):
        parse_board("GTMG T")


def test_duplicate_reported_before_missing_marker() -> None:
    with pytest.raises(MultipleTheseus):
        parse_board("TT")


def test_missing_markers_checked_in_order() -> None:
    with pytest.raises(NoTheseus):
        parse_board("   ")
    with pytest.raises(NoMinotaur):
        parse_board("T  ")


def test_board_errors_are_value_errors_with_messages() -> None:
    with pytest.raises(ValueError, match="No goal"):
        parse_board("TM")
    with pytest.raises(ValueError, match="Multiple minotaur"):
        parse_board("TMMG")


def test_unknown_characters_kept_in_lenient_mode() -> None:
    parsed = parse_board("TM?G")
    assert parsed.grid.tile(0, 2) == "?"
    assert parsed.goal == Position(0, 3)


def test_lowercase_markers_are_not_markers() -> None:
    with pytest.raises(NoTheseus):
        parse_board("tM G")


def test_strict_mode_rejects_unknown_characters() -> None:
    with pytest.raises(InvalidCharacter) as info:
        parse_board(board("XXXX", "XT?X", "XMGX"), strict=True)
    assert info.value.char == "?"
    assert info.value.position == Position(1, 2)
    assert str(info.value) == "Invalid character: ?"


def test_strict_mode_accepts_alphabet() -> None:
    parsed = parse_board(board("XXXXX", "XT MX", "X  GX", "XXXXX"), strict=True)
    assert parsed.minotaur == Position(1, 3)


@pytest.mark.parametrize(
    "text, rows",
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\n\nb", ["a", "", "b"]),
        ("a\n\n", ["a", ""]),
        (" x \n", [" x "]),
    ],
)
def test_split_rows(text: str, rows: List[str]) -> None:
    assert split_rows(text) == rows


def test_crlf_board() -> None:
    parsed = parse_board("XXXX\r\nXTMG\r\nXXXX\r\n")
    assert parsed.theseus == Position(1, 1)
    assert parsed.grid.lines() == ["XXXX", "XTMG", "XXXX"]


@pytest.mark.parametrize("name", sorted(LEVEL_REGISTRY))
def test_bundled_levels_parse_strictly(name: str) -> None:
    parsed = parse_board(LEVEL_REGISTRY[name], strict=True)
    assert cells_where(parsed.grid, "T") == [parsed.theseus]
    assert cells_where(parsed.grid, "M") == [parsed.minotaur]
    assert cells_where(parsed.grid, "G") == [parsed.goal]
