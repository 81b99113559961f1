"""
Game constants for the torus snake simulation.
"""

from .coordinate import Coordinate

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downward
DIRECTION_VECTORS = {
    UP: Coordinate(0, -1),
    DOWN: Coordinate(0, 1),
    LEFT: Coordinate(-1, 0),
    RIGHT: Coordinate(1, 0),
}

# Game settings
GRID_SIZE = 20
TICK_INTERVAL_MS = 200
START = Coordinate(10, 10)
DEFAULT_HEADING = RIGHT

# Window settings (presentation only)
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

# Game status
PLAYING = "playing"
DEAD = "dead"
WON = "won"
