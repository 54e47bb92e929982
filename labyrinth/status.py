"""Terminal condition evaluation.

Status is a pure function of the cached marker positions: reaching the Goal
wins, sharing a cell with the Minotaur loses. The Goal is checked first, so a
turn that does both counts as a win.
"""

from labyrinth.types import GameStatus, Position


def evaluate_status(theseus: Position, minotaur: Position, goal: Position) -> GameStatus:
    """Return the status for the given marker positions."""
    if theseus == goal:
        return GameStatus.WIN
    if theseus == minotaur:
        return GameStatus.LOSE
    return GameStatus.CONTINUE


def is_terminal_status(status: GameStatus) -> bool:
    """Return True if the game has been decided."""
    return status != GameStatus.CONTINUE
