"""
Base player interface for autoplay.
"""

from domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current snapshot and returns the direction it
    wants the snake to take on the next tick.
    """

    name = "player"

    def get_move(self, snapshot: GameSnapshot) -> str:
        """
        Return a move direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
