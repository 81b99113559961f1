"""
Autoplay players for the torus snake simulation.

Players stand in for keyboard input when the game runs headless: each one
turns a GameSnapshot into a directional intent.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
