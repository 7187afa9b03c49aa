"""
Direction helpers: parsing external input into deltas.
"""

from typing import Optional, Tuple, Union

from .constants import DIRECTION_NAMES, VALID_MOVES

Direction = Tuple[int, int]


def parse_direction(value: Union[str, Direction, None]) -> Optional[Direction]:
    """
    Normalize a direction given as a name ("UP", "left", ...) or an (dx, dy) pair.

    Returns None for anything that is not one of the four unit moves,
    including None, zero vectors and diagonals.
    """
    if value is None:
        return None

    if isinstance(value, str):
        return DIRECTION_NAMES.get(value.strip().upper())

    try:
        dx, dy = value
    except (TypeError, ValueError):
        return None

    if isinstance(dx, bool) or isinstance(dy, bool):
        return None
    if not isinstance(dx, int) or not isinstance(dy, int):
        return None

    delta = (dx, dy)
    return delta if delta in VALID_MOVES else None


def is_opposite(a: Direction, b: Direction) -> bool:
    """True when `a` is the exact reversal of `b`."""
    return a[0] == -b[0] and a[1] == -b[1]


def direction_name(delta: Optional[Direction]) -> Optional[str]:
    """Reverse lookup of DIRECTION_NAMES; None for unknown deltas."""
    for name, candidate in DIRECTION_NAMES.items():
        if candidate == delta:
            return name
    return None
