"""
Domain entities for the torus snake simulation.

This module contains the core game entities that are independent of
presentation concerns (windowing, input, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS,
    GRID_SIZE, TICK_INTERVAL_MS, START, DEFAULT_HEADING,
    PLAYING, DEAD, WON,
)
from .coordinate import Coordinate, add, wrap, wrap_axis, equals
from .clock import SimulationClock, ManualClock
from .placement import RandomPlacer
from .snake import Snake, AdvanceResult
from .game_state import GameState, GameSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_VECTORS',
    'GRID_SIZE', 'TICK_INTERVAL_MS', 'START', 'DEFAULT_HEADING',
    'PLAYING', 'DEAD', 'WON',
    'Coordinate', 'add', 'wrap', 'wrap_axis', 'equals',
    'SimulationClock', 'ManualClock',
    'RandomPlacer',
    'Snake', 'AdvanceResult',
    'GameState', 'GameSnapshot',
]
