"""
Greedy player - heads for the food along the shortest wrapped path.
"""

import random
from typing import Optional

from domain.game_state import GameSnapshot
from .random_player import RandomPlayer, next_cells, safe_moves


def torus_distance(a, b, grid_size: int) -> int:
    """Manhattan distance when both axes wrap around."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return min(dx, grid_size - dx) + min(dy, grid_size - dy)


class GreedyPlayer(RandomPlayer):
    """
    Picks the safe direction that gets closest to the food.

    Ties go to the rng. Falls back to RandomPlayer behaviour when there is
    no food on the board.
    """

    name = "greedy"

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)

    def get_move(self, snapshot: GameSnapshot) -> str:
        if snapshot.food is None:
            return super().get_move(snapshot)

        moves = safe_moves(snapshot)
        if not moves:
            return super().get_move(snapshot)

        cells = next_cells(snapshot)
        distances = {
            move: torus_distance(cells[move], snapshot.food, snapshot.grid_size)
            for move in moves
        }
        best = min(distances.values())
        return self.rng.choice([m for m in moves if distances[m] == best])
