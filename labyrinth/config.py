"""Game configuration.

:class:`GameConfig` gathers the presentation and rule choices that sit around
the engine: which input tokens map to which command, how walls are drawn,
whether unknown board characters are rejected, and which pursuit rule the
Minotaur follows. It is immutable; build a new one with
``dataclasses.replace`` or :meth:`GameConfig.from_args`.
"""

from argparse import Namespace
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from pyrsistent import pmap
from pyrsistent.typing import PMap

from labyrinth.actions import Command
from labyrinth.pursuit import PURSUIT_FN_REGISTRY
from labyrinth.render import WALL_GLYPH
from labyrinth.types import PursuitFn

DEFAULT_KEY_BINDINGS: PMap[str, Command] = pmap(
    {
        "w": Command.UP,
        "a": Command.LEFT,
        "s": Command.DOWN,
        "d": Command.RIGHT,
    }
)
"""Case-sensitive token table; anything else is ``Command.SKIP``."""


def key_bindings_from_tokens(tokens: Sequence[str]) -> PMap[str, Command]:
    """Build a token table from four tokens given as UP LEFT DOWN RIGHT.

    Raises:
        ValueError: If not exactly four distinct tokens are given.
    """
    if len(tokens) != 4 or len(set(tokens)) != 4:
        raise ValueError(
            f"Expected four distinct tokens (up left down right), got {list(tokens)}"
        )
    up, left, down, right = tokens
    return pmap(
        {
            up: Command.UP,
            left: Command.LEFT,
            down: Command.DOWN,
            right: Command.RIGHT,
        }
    )


@dataclass(frozen=True)
class GameConfig:
    """Settings for one play session.

    Attributes:
        key_bindings (Mapping[str, Command]): Input token -> command.
        wall_glyph (str): Character printed for wall cells.
        strict (bool): Reject board characters outside the alphabet.
        pursuit (str): Key into ``PURSUIT_FN_REGISTRY``.
    """

    key_bindings: Mapping[str, Command] = field(
        default_factory=lambda: DEFAULT_KEY_BINDINGS
    )
    wall_glyph: str = WALL_GLYPH
    strict: bool = False
    pursuit: str = "greedy"

    def __post_init__(self) -> None:
        if self.pursuit not in PURSUIT_FN_REGISTRY:
            raise ValueError(
                f"Unknown pursuit {self.pursuit!r}; "
                f"choose from {sorted(PURSUIT_FN_REGISTRY)}"
            )
        if len(self.wall_glyph) != 1:
            raise ValueError(f"Wall glyph must be one character, got {self.wall_glyph!r}")

    @property
    def pursuit_fn(self) -> PursuitFn:
        return PURSUIT_FN_REGISTRY[self.pursuit]

    @classmethod
    def from_args(cls, args: Namespace) -> "GameConfig":
        """Build a config from parsed command-line arguments."""
        key_bindings = (
            key_bindings_from_tokens(args.keys) if args.keys else DEFAULT_KEY_BINDINGS
        )
        return cls(
            key_bindings=key_bindings,
            wall_glyph=args.wall_glyph,
            strict=args.strict,
            pursuit=args.pursuit,
        )
