from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from labyrinth.actions import Command
from labyrinth.config import GameConfig
from labyrinth.controls import read_command
from labyrinth.errors import BoardError, OutOfBounds
from labyrinth.game import Game
from labyrinth.levels import LEVEL_REGISTRY, load_level
from labyrinth.pursuit import PURSUIT_FN_REGISTRY
from labyrinth.render import WALL_GLYPH
from labyrinth.types import GameStatus

logger = logging.getLogger(__name__)

EXIT_WIN = 0
EXIT_LOSE = 1
EXIT_BOARD_ERROR = 2
EXIT_ABANDONED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='labyrinth',
        description='Lead Theseus to the goal before the Minotaur catches him',
    )
    parser.add_argument('board', nargs='?', default=None, help='Board text file (default: bundled level)')
    parser.add_argument('--level', choices=sorted(LEVEL_REGISTRY), default='classic', help='Bundled level to play when no board file is given')
    parser.add_argument('--strict', action='store_true', help='Reject unknown board characters')
    parser.add_argument('--pursuit', choices=sorted(PURSUIT_FN_REGISTRY), default='greedy', help='Minotaur movement rule')
    parser.add_argument('--keys', nargs=4, metavar=('UP', 'LEFT', 'DOWN', 'RIGHT'), default=None, help='Input tokens for the four directions (default: w a s d)')
    parser.add_argument('--wall-glyph', default=WALL_GLYPH, help='Character drawn for walls')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log engine decisions')
    return parser


def play(game: Game, config: GameConfig, stdin: TextIO, stdout: TextIO) -> Optional[GameStatus]:
    """Run the turn loop until the game is decided or input ends.

    Returns the final status, or None if input ran out first.
    """
    game.show(stdout, config.wall_glyph)
    while True:
        command = read_command(stdin, config.key_bindings)
        if command is None:
            return None
        game.theseus_move(command)
        game.minotaur_move()
        game.show(stdout, config.wall_glyph)
        status = game.status()
        if status != GameStatus.CONTINUE:
            return status


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = GameConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        text = Path(args.board).read_text(encoding='utf-8') if args.board else load_level(args.level)
    except OSError as exc:
        print(f'error: cannot read board: {exc}', file=sys.stderr)
        return EXIT_BOARD_ERROR
    try:
        game = Game.from_board(text, strict=config.strict, pursuit_fn=config.pursuit_fn)
    except BoardError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return EXIT_BOARD_ERROR

    keys = {command: token for token, command in config.key_bindings.items()}
    print(
        f"Move with {keys.get(Command.UP)}/{keys.get(Command.LEFT)}/"
        f"{keys.get(Command.DOWN)}/{keys.get(Command.RIGHT)} then enter; anything else waits.",
        file=stdout,
    )

    try:
        status = play(game, config, stdin, stdout)
    except OutOfBounds as exc:
        print(f'error: board is not enclosed by walls ({exc})', file=sys.stderr)
        return EXIT_BOARD_ERROR

    if status is None:
        logger.info('Input ended before the game was decided')
        return EXIT_ABANDONED
    logger.info('Game over: %s', status)
    if status == GameStatus.WIN:
        print('You win!', file=stdout)
        return EXIT_WIN
    print('You lose!', file=stdout)
    return EXIT_LOSE
