"""
Player implementations for Snake Arcade.

Players are automated input sources: they read a snapshot and pick the
direction to queue before the next tick.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
