"""Bundled boards.

Every board here is enclosed by walls and has exactly one of each marker, so
it parses in strict mode. Used by the CLI when no board file is given.
"""

from typing import Dict

CLASSIC = """\
XXXXXXXXXXXX
XT   X     X
X XX X XXX X
X  X   X   X
XX XXXXX X X
X    X   XMX
X XX X XXX X
X  X     X X
XX XXXXX X X
X        XGX
XXXXXXXXXXXX
"""

OPEN = """\
XXXXXXXX
XT     X
X      X
X  XX  X
X  XX  X
X     MX
XG     X
XXXXXXXX
"""

CORRIDOR = """\
XXXXXXXXX
XT  M  GX
XXXXXXXXX
"""

LEVEL_REGISTRY: Dict[str, str] = {
    "classic": CLASSIC,
    "open": OPEN,
    "corridor": CORRIDOR,
}
"""Level name -> board text."""


def load_level(name: str) -> str:
    """Return the board text of a bundled level.

    Raises:
        KeyError: If no level has that name.
    """
    if name not in LEVEL_REGISTRY:
        raise KeyError(f"Unknown level {name!r}; choose from {sorted(LEVEL_REGISTRY)}")
    return LEVEL_REGISTRY[name]
