"""
Domain entities for the Snake Arcade game engine.

This module contains the core game entities that are independent of
presentation concerns (terminal drawing, images, key handling, storage).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, GRID_SIZE,
    START_INTERVAL_MS, SPEED_STEP_MS, MIN_INTERVAL_MS, SPEEDUP_EVERY,
)
from .directions import parse_direction, is_opposite, direction_name
from .snake import Snake
from .food import place_food, free_cells
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'GRID_SIZE',
    'START_INTERVAL_MS', 'SPEED_STEP_MS', 'MIN_INTERVAL_MS', 'SPEEDUP_EVERY',
    'parse_direction', 'is_opposite', 'direction_name',
    'Snake',
    'place_food', 'free_cells',
    'GameState',
]
