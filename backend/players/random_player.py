"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Dict, List, Optional, Tuple

from domain.constants import DIRECTION_VECTORS, VALID_MOVES
from domain.coordinate import Coordinate, add, wrap
from domain.game_state import GameSnapshot
from .base import Player


def next_cells(snapshot: GameSnapshot) -> Dict[str, Tuple[int, int]]:
    """Map each direction to the cell the head would wrap into."""
    head = Coordinate(*snapshot.head)
    return {
        move: tuple(wrap(add(head, vector), snapshot.grid_size))
        for move, vector in DIRECTION_VECTORS.items()
    }


def safe_moves(snapshot: GameSnapshot) -> List[str]:
    """
    Directions that don't run into the body.

    The tail counts as blocking: the collision check runs before the tail
    moves out of the way.
    """
    blocking = {tuple(p) for p in snapshot.snake}
    moves: List[str] = [
        move for move, cell in next_cells(snapshot).items()
        if cell not in blocking
    ]
    # Sorted so a seeded rng gives the same choice regardless of set ordering
    return sorted(moves)


class RandomPlayer(Player):
    """
    A random AI that picks a direction avoiding self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, snapshot: GameSnapshot) -> str:
        valid_moves = safe_moves(snapshot)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
