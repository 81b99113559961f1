"""
Registry for autoplay players.
Maps player keys (e.g., 'random', 'greedy') to player classes.
To add a player, create a module with a Player subclass, import it here,
and add an entry to PLAYER_LOADERS.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


# Lazy imports to avoid circular dependencies
def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_greedy_player() -> Type[Player]:
    from .greedy_player import GreedyPlayer
    return GreedyPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "greedy": _get_greedy_player,
}

DEFAULT_PLAYER = "greedy"

# Canonical list of available player keys
AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'random', 'greedy'. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = DEFAULT_PLAYER

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[player_key]()


def list_players() -> List[dict]:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Random direction that avoids the body"},
        {"key": "greedy", "description": "Shortest wrapped path to the food, avoiding the body"},
    ]
