"""
RandomPlacer - uniform random cells and collision-avoiding food placement.
"""

import logging
import random
from typing import Iterable, Optional

from .constants import GRID_SIZE
from .coordinate import Coordinate

logger = logging.getLogger(__name__)


class RandomPlacer:
    """
    Produces uniformly random grid cells from an injected random source.

    rng only needs a randint(a, b) method, so a seeded random.Random or a
    scripted fake both work.
    """

    def __init__(self, rng: Optional[random.Random] = None, grid_size: int = GRID_SIZE):
        self.rng = rng if rng is not None else random.Random()
        self.grid_size = grid_size

    def random_cell(self) -> Coordinate:
        x = self.rng.randint(0, self.grid_size - 1)
        y = self.rng.randint(0, self.grid_size - 1)
        return Coordinate(x, y)

    def place_food(self, occupied: Iterable[Coordinate]) -> Optional[Coordinate]:
        """
        Return a random cell not in occupied.

        Rejection-samples until a free cell comes up. Returns None when
        occupied covers the whole board, since no free cell exists.
        """
        occupied = {Coordinate(*cell) for cell in occupied}
        in_bounds = [
            c for c in occupied
            if 0 <= c.x < self.grid_size and 0 <= c.y < self.grid_size
        ]
        if len(in_bounds) >= self.grid_size * self.grid_size:
            logger.info("Board is full, no cell left for food")
            return None

        while True:
            cell = self.random_cell()
            if cell not in occupied:
                return cell
