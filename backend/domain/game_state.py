"""
GameState - the simulation state machine, and GameSnapshot - a read-only
view of it at a point in time.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Tuple

from .clock import SimulationClock
from .constants import (
    DEAD,
    DEFAULT_HEADING,
    GRID_SIZE,
    PLAYING,
    START,
    VALID_MOVES,
    WON,
)
from .coordinate import Coordinate
from .placement import RandomPlacer
from .snake import NOT_ADVANCED, AdvanceResult, Snake

logger = logging.getLogger(__name__)


class GameSnapshot:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of executed ticks since the last (re)start
        snake: list of (x, y) from head to tail
        food: (x, y) of the food, or None once the board is full
        alive: whether the snake is alive
        status: 'playing', 'dead' or 'won'
        score: food eaten since the last (re)start
        grid_size: side length of the board
        heading: current heading
    """

    def __init__(
        self,
        tick: int,
        snake: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        alive: bool,
        status: str,
        score: int,
        grid_size: int,
        heading: str = DEFAULT_HEADING
    ):
        self.tick = tick
        self.snake = snake
        self.food = food
        self.alive = alive
        self.status = status
        self.score = score
        self.grid_size = grid_size
        self.heading = heading

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Rows run top to bottom (y grows downward), x-axis labels at bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form used for replays."""
        return {
            "tick": self.tick,
            "snake": [list(p) for p in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "alive": self.alive,
            "status": self.status,
            "score": self.score,
            "grid_size": self.grid_size,
            "heading": self.heading,
        }

    def __repr__(self):
        return (
            f"<GameSnapshot tick={self.tick}, status={self.status}, "
            f"length={len(self.snake)}, food={self.food}, score={self.score}>"
        )


class GameState:
    """
    Manages:
      - The snake and its tick gate
      - The food cell
      - Score
      - Status (playing / dead / won)
      - Buffered heading input
      - Restart

    Everything random goes through the injected rng, so a seeded
    random.Random gives a reproducible game.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[SimulationClock] = None,
        grid_size: int = GRID_SIZE,
        start: Coordinate = START,
        default_heading: str = DEFAULT_HEADING
    ):
        self.grid_size = grid_size
        self.start = Coordinate(*start)
        self.default_heading = default_heading
        self.clock = clock if clock is not None else SimulationClock()
        self.placer = RandomPlacer(rng, grid_size)

        self.snake: Snake = None
        self.food: Optional[Coordinate] = None
        self.score = 0
        self.status = PLAYING
        self.tick = 0
        self.pending_heading: Optional[str] = None

        self._new_round()

    def _new_round(self):
        self.clock.reset()
        self.snake = Snake(
            [self.start],
            heading=self.default_heading,
            clock=self.clock,
            grid_size=self.grid_size
        )
        self.score = 0
        self.tick = 0
        self.status = PLAYING
        self.pending_heading = None
        self.food = self.placer.place_food(self.snake.positions)

    @property
    def alive(self) -> bool:
        return self.status != DEAD

    @property
    def body(self) -> List[Coordinate]:
        return list(self.snake.positions)

    @property
    def head(self) -> Coordinate:
        return self.snake.head

    @property
    def heading(self) -> str:
        return self.snake.heading

    def set_heading(self, direction: str):
        """
        Buffer a directional intent for the next tick.

        Last write wins; unknown directions and input while not playing are
        ignored.
        """
        if direction not in VALID_MOVES:
            return
        if self.status != PLAYING:
            return
        self.pending_heading = direction

    def update(self) -> AdvanceResult:
        """
        One poll of the simulation.

        Applies the buffered heading, then lets the snake advance if its tick
        gate is open. Growth scores a point and respawns food off the new
        body; a collision moves the game to 'dead'.
        """
        if self.status != PLAYING:
            return NOT_ADVANCED

        if self.pending_heading is not None:
            self.snake.heading = self.pending_heading
            self.pending_heading = None

        result = self.snake.advance(self.food)
        if not result.advanced:
            return result

        self.tick += 1

        if result.died:
            self.status = DEAD
            logger.info(f"Snake died at tick {self.tick} with score {self.score}")
            return result

        if result.grew:
            self.score += 1
            self.food = self.placer.place_food(self.snake.positions)
            if self.food is None:
                self.status = WON
                logger.info(f"Board filled at tick {self.tick}, score {self.score}")
            else:
                logger.debug(f"Food eaten, score {self.score}, new food at {tuple(self.food)}")

        return result

    def restart(self) -> bool:
        """Start over after the game has ended. Ignored while playing."""
        if self.status == PLAYING:
            return False
        logger.info(f"Restarting after {self.status} with score {self.score}")
        self._new_round()
        return True

    def snapshot(self) -> GameSnapshot:
        """
        Return a snapshot of the current board as a GameSnapshot.
        """
        return GameSnapshot(
            tick=self.tick,
            snake=[tuple(p) for p in self.snake.positions],
            food=tuple(self.food) if self.food is not None else None,
            alive=self.alive,
            status=self.status,
            score=self.score,
            grid_size=self.grid_size,
            heading=self.snake.heading
        )

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, status={self.status}, "
            f"head={tuple(self.head)}, food={self.food}, score={self.score}>"
        )
