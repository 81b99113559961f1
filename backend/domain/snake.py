"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import Iterable, NamedTuple, Optional

from .clock import SimulationClock
from .constants import DEFAULT_HEADING, DIRECTION_VECTORS, GRID_SIZE
from .coordinate import Coordinate, add, equals, wrap

logger = logging.getLogger(__name__)


class AdvanceResult(NamedTuple):
    """Outcome of one Snake.advance() poll."""

    advanced: bool = False
    grew: bool = False
    died: bool = False


NOT_ADVANCED = AdvanceResult()


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Coordinate from head at index 0 to tail at the end
        heading: one of UP, DOWN, LEFT, RIGHT
        alive: whether the snake is still alive
        clock: tick gate deciding when the snake may move
        grid_size: side length of the toroidal grid
    """

    def __init__(
        self,
        positions: Iterable[Coordinate],
        heading: str = DEFAULT_HEADING,
        clock: Optional[SimulationClock] = None,
        grid_size: int = GRID_SIZE
    ):
        self.positions = deque(Coordinate(*p) for p in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one cell.")
        self.heading = heading
        self.alive = True
        self.clock = clock if clock is not None else SimulationClock()
        self.grid_size = grid_size

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Coordinate:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def next_head(self) -> Coordinate:
        """Where the head lands if the snake moves now."""
        return wrap(add(self.head, DIRECTION_VECTORS[self.heading]), self.grid_size)

    def occupies(self, cell: Coordinate) -> bool:
        return any(equals(cell, p) for p in self.positions)

    def advance(self, current_food: Optional[Coordinate]) -> AdvanceResult:
        """
        Move one cell if the tick gate has elapsed.

        The collision check runs against the whole current body before
        anything is mutated, so a dead snake keeps its final shape. Moving
        onto current_food keeps the tail (growth); any other move drops it.
        """
        if not self.alive:
            return NOT_ADVANCED
        if not self.clock.try_tick():
            return NOT_ADVANCED

        candidate = self.next_head()

        if self.occupies(candidate):
            self.alive = False
            logger.debug(f"Snake ran into itself at {tuple(candidate)}")
            return AdvanceResult(advanced=True, died=True)

        self.positions.appendleft(candidate)

        if equals(candidate, current_food):
            return AdvanceResult(advanced=True, grew=True)

        self.positions.pop()
        return AdvanceResult(advanced=True)
