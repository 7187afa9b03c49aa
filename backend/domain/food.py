"""
Food placement.

Uses a simple full scan to collect free cells. For a 20x20 board that is a
few hundred cells per call; a larger board would want an incrementally
maintained free-list instead.
"""

import random
from typing import Iterable, Optional, Tuple

Cell = Tuple[int, int]


def free_cells(snake: Iterable[Cell], grid_size: int):
    """Return every cell on the board not occupied by the snake, row by row."""
    occupied = set(snake)
    return [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in occupied
    ]


def place_food(snake: Iterable[Cell], grid_size: int, rng=None) -> Optional[Cell]:
    """
    Pick a random empty cell for the next food item.

    Args:
        snake: cells occupied by the snake
        grid_size: board width/height
        rng: random source with a `choice` method (defaults to the `random` module)

    Returns:
        The chosen (x, y) cell, or None when the board is full (a win).
    """
    free = free_cells(snake, grid_size)
    if not free:
        return None

    rng = rng or random
    return rng.choice(free)
