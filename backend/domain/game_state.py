"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from .constants import (
    STATUS_GAME_OVER,
    STATUS_RUNNING,
    STATUS_WIN,
    TERMINAL_STATUSES,
)
from .directions import direction_name

Cell = Tuple[int, int]


class GameState:
    """
    A snapshot of the game after a tick (or a reset).

    Renderers, the HUD and the high-score store read these; nothing they do
    feeds back into the engine.

    Attributes:
        snake: tuple of (x, y), head first
        direction: committed (dx, dy)
        pending_direction: queued (dx, dy) not yet applied, or None
        food: (x, y) of the food, or None once the board is full
        score: apples eaten this run
        interval_ms: current tick interval
        status: one of ready / running / paused / game_over / win
        death_reason: 'wall' or 'self' after a game over, otherwise None
        tick_number: ticks processed since reset
        grid_size: board width and height
        wrap: whether the tick that produced this snapshot wrapped at walls
        high_score: best score known to the engine
        new_high_score: True only on the tick the score first beat the high score
        high_score_to_persist: new high score to store at the end of a run, or None
    """

    def __init__(
        self,
        snake: Sequence[Cell],
        direction: Cell,
        pending_direction: Optional[Cell],
        food: Optional[Cell],
        score: int,
        interval_ms: int,
        status: str,
        grid_size: int,
        tick_number: int = 0,
        death_reason: Optional[str] = None,
        wrap: bool = False,
        high_score: int = 0,
        new_high_score: bool = False,
        high_score_to_persist: Optional[int] = None,
    ):
        self.snake = tuple(snake)
        self.direction = direction
        self.pending_direction = pending_direction
        self.food = food
        self.score = score
        self.interval_ms = interval_ms
        self.status = status
        self.grid_size = grid_size
        self.tick_number = tick_number
        self.death_reason = death_reason
        self.wrap = wrap
        self.high_score = high_score
        self.new_high_score = new_high_score
        self.high_score_to_persist = high_score_to_persist

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def running(self) -> bool:
        return self.status == STATUS_RUNNING

    @property
    def game_over(self) -> bool:
        return self.status == STATUS_GAME_OVER

    @property
    def won(self) -> bool:
        return self.status == STATUS_WIN

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Rows run top to bottom (y grows downward), x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view of the snapshot (tuples become lists on dump)."""
        return {
            "snake": [list(cell) for cell in self.snake],
            "direction": direction_name(self.direction),
            "pending_direction": direction_name(self.pending_direction),
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "interval_ms": self.interval_ms,
            "status": self.status,
            "death_reason": self.death_reason,
            "tick_number": self.tick_number,
            "grid_size": self.grid_size,
            "wrap": self.wrap,
            "high_score": self.high_score,
            "new_high_score": self.new_high_score,
            "high_score_to_persist": self.high_score_to_persist,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status}, "
            f"head={self.head}, length={len(self.snake)}, food={self.food}, "
            f"score={self.score}>"
        )
