"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional, Tuple

from domain.constants import DOWN, LEFT, RIGHT, UP
from domain.directions import is_opposite
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, its own body
    and instant reversal.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def safe_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        snake_positions = list(game_state.snake)
        head_x, head_y = snake_positions[0]
        size = game_state.grid_size

        # The engine checks the new head against every current cell, tail included
        body = set(snake_positions)

        valid_moves: List[Tuple[int, int]] = []
        for move in (UP, DOWN, LEFT, RIGHT):
            if is_opposite(move, game_state.direction):
                continue

            new_x, new_y = head_x + move[0], head_y + move[1]
            if game_state.wrap:
                new_x %= size
                new_y %= size
            elif not (0 <= new_x < size and 0 <= new_y < size):
                continue

            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        return valid_moves

    def get_move(self, game_state: GameState) -> Tuple[int, int]:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, keep heading the same way (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
