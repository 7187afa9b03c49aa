"""
Base player interface: anything that decides the snake's next direction.
"""

from typing import Optional, Tuple

from domain.game_state import GameState


class Player:
    """
    Base class/interface for automated input sources.

    A player looks at a snapshot and returns the direction to queue before
    the next tick.
    """

    def get_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of UP, DOWN, LEFT, RIGHT as (dx, dy), or None to keep going straight
        """
        raise NotImplementedError
