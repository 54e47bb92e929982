"""Reading player commands from a text stream.

Stdin is line-buffered, so the player types a token and presses enter each
turn. Tokens are looked up case-sensitively in the key-binding table (default
``w``/``a``/``s``/``d`` for up/left/down/right). Anything else, including an
empty line, is ``Command.SKIP``: a typo costs a turn, never an error.
"""

from typing import Mapping, Optional, TextIO

from labyrinth.actions import Command
from labyrinth.config import DEFAULT_KEY_BINDINGS


def parse_command(
    token: str, key_bindings: Mapping[str, Command] = DEFAULT_KEY_BINDINGS
) -> Command:
    """Map one input token to a command."""
    return key_bindings.get(token, Command.SKIP)


def read_command(
    stream: TextIO, key_bindings: Mapping[str, Command] = DEFAULT_KEY_BINDINGS
) -> Optional[Command]:
    """Read one line from ``stream`` and map it to a command.

    Only the line terminator is stripped. Returns None at end of stream.
    """
    line = stream.readline()
    if line == "":
        return None
    return parse_command(line.rstrip("\r\n"), key_bindings)
