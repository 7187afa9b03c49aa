"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Tuple

Cell = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Cell]):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one cell.")

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        return self.positions[-1]

    def grow_to(self, cell: Cell) -> None:
        """Add a new head, keeping the tail."""
        self.positions.appendleft(cell)

    def drop_tail(self) -> Cell:
        return self.positions.pop()

    def cells(self) -> List[Cell]:
        return list(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, tail={self.tail}, length={len(self)}>"
