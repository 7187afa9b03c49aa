"""
Snake Arcade game engine.

`GameEngine` owns all mutable game state. It is advanced one step at a time by
`tick()`, which an external scheduler calls every `interval_ms` milliseconds,
and it receives input through `queue_direction()`. Callers read immutable
`GameState` snapshots; the engine never draws, sleeps or touches storage.
"""

import logging
import random
from typing import Optional

from config import GameSettings
from domain.constants import (
    DEATH_SELF,
    DEATH_WALL,
    GRID_SIZE,
    INITIAL_LENGTH,
    MIN_INTERVAL_MS,
    RIGHT,
    SPEED_STEP_MS,
    SPEEDUP_EVERY,
    START_INTERVAL_MS,
    STATUS_GAME_OVER,
    STATUS_PAUSED,
    STATUS_READY,
    STATUS_RUNNING,
    STATUS_WIN,
)
from domain.directions import is_opposite, parse_direction
from domain.food import place_food
from domain.game_state import GameState
from domain.snake import Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Manages:
      - Snake and committed/pending direction
      - Food
      - Score and speed progression
      - Running / terminal flags
      - High-score signals for the HUD and the high-score store
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        settings: Optional[GameSettings] = None,
        rng: Optional[random.Random] = None,
        high_score: int = 0,
    ):
        if grid_size < INITIAL_LENGTH + 1:
            raise ValueError(
                f"grid_size must be at least {INITIAL_LENGTH + 1}, got {grid_size}"
            )

        self.grid_size = grid_size
        # Not owned by the engine: read on every tick so callers can flip wrap mode live.
        self.settings = settings if settings is not None else GameSettings()
        self.rng = rng if rng is not None else random.Random()
        self.high_score = max(0, int(high_score))

        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> GameState:
        """
        Start a new run: length-3 snake centered on the board heading right,
        score 0, starting speed, fresh food, paused until started.
        """
        mid = self.grid_size // 2
        self.snake = Snake([(mid - i, mid) for i in range(INITIAL_LENGTH)])
        self.direction = RIGHT
        self.pending_direction = None
        self.score = 0
        self.interval_ms = START_INTERVAL_MS
        self.tick_number = 0

        self.running = False
        self.started = False
        self.terminal_status = None
        self.death_reason = None

        # High-score bookkeeping for this run
        self.run_start_high_score = self.high_score
        self.high_score_signalled = False
        self.new_high_score = False
        self.high_score_to_persist = None

        self.food = place_food(self.snake, self.grid_size, self.rng)

        logger.info(
            "New game: grid=%sx%s head=%s food=%s high_score=%s",
            self.grid_size, self.grid_size, self.snake.head, self.food, self.high_score,
        )
        return self.get_current_state()

    @property
    def is_terminal(self) -> bool:
        return self.terminal_status is not None

    @property
    def status(self) -> str:
        if self.terminal_status is not None:
            return self.terminal_status
        if self.running:
            return STATUS_RUNNING
        return STATUS_PAUSED if self.started else STATUS_READY

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def queue_direction(self, direction) -> bool:
        """
        Remember `direction` to apply on the next tick.

        The reversal check happens in tick(), so only the last direction queued
        before a tick counts. Malformed directions and input after the game has
        ended are ignored.

        Returns:
            True if the direction was queued.
        """
        if self.is_terminal:
            return False

        delta = parse_direction(direction)
        if delta is None:
            logger.debug("Ignoring invalid direction %r", direction)
            return False

        self.pending_direction = delta
        return True

    def start(self) -> bool:
        """Mark the game as running. Ignored once the game has ended."""
        if self.is_terminal:
            return False
        self.running = True
        self.started = True
        return True

    def pause(self) -> bool:
        """Stop running without touching the board. Ignored once the game has ended."""
        if self.is_terminal:
            return False
        self.running = False
        return True

    def toggle_pause(self) -> bool:
        """Pause a running game or resume a paused one; returns the new running flag."""
        if self.is_terminal:
            return False
        if self.running:
            self.pause()
        else:
            self.start()
        return self.running

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self) -> GameState:
        """
        Single game update:
          1) Apply the queued direction unless it reverses the snake
          2) Compute the next head
          3) Wrap or die at the walls
          4) Die on self-collision
          5) Move the head forward
          6) Eat (grow, score, speed up, new food) or drop the tail
          7) Return the new snapshot

        The running flag is not consulted here; the scheduler decides when to
        call tick(). A finished game is left untouched.
        """
        if self.is_terminal:
            return self.get_current_state()

        self.new_high_score = False

        if self.pending_direction is not None:
            if not is_opposite(self.pending_direction, self.direction):
                self.direction = self.pending_direction
            self.pending_direction = None

        hx, hy = self.snake.head
        dx, dy = self.direction
        x, y = hx + dx, hy + dy

        if self.settings.wrap:
            x %= self.grid_size
            y %= self.grid_size
        elif not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            return self._end_game(STATUS_GAME_OVER, DEATH_WALL)

        head = (x, y)
        if head in self.snake:
            return self._end_game(STATUS_GAME_OVER, DEATH_SELF)

        self.snake.grow_to(head)
        self.tick_number += 1

        if head == self.food:
            self._eat()
        else:
            self.snake.drop_tail()

        return self.get_current_state()

    def _eat(self) -> None:
        self.score += 1

        if self.score % SPEEDUP_EVERY == 0 and self.interval_ms > MIN_INTERVAL_MS:
            self.interval_ms = max(MIN_INTERVAL_MS, self.interval_ms - SPEED_STEP_MS)
            logger.debug("Speed up at score %s: interval=%sms", self.score, self.interval_ms)

        # Celebrate beating the stored high score once per run; persisting waits for the end.
        if self.score > self.run_start_high_score and not self.high_score_signalled:
            self.high_score_signalled = True
            self.new_high_score = True
            logger.info("New high score reached mid-run: %s", self.score)

        self.food = place_food(self.snake, self.grid_size, self.rng)
        if self.food is None:
            self._end_game(STATUS_WIN, None)

    def _end_game(self, status: str, reason: Optional[str]) -> GameState:
        self.running = False
        self.terminal_status = status
        self.death_reason = reason
        self.pending_direction = None

        if self.score > self.run_start_high_score:
            self.high_score = self.score
            self.high_score_to_persist = self.score

        if status == STATUS_WIN:
            logger.info("Board full, game won with score %s", self.score)
        else:
            logger.info(
                "Game over (%s) at tick %s with score %s", reason, self.tick_number, self.score
            )
        return self.get_current_state()

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def get_current_state(self) -> GameState:
        """Return a read-only snapshot of the current game."""
        return GameState(
            snake=self.snake.cells(),
            direction=self.direction,
            pending_direction=self.pending_direction,
            food=self.food,
            score=self.score,
            interval_ms=self.interval_ms,
            status=self.status,
            grid_size=self.grid_size,
            tick_number=self.tick_number,
            death_reason=self.death_reason,
            wrap=bool(self.settings.wrap),
            high_score=self.high_score,
            new_high_score=self.new_high_score,
            high_score_to_persist=self.high_score_to_persist,
        )
