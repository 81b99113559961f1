"""
Tests for autoplay players and the player registry.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import DOWN, LEFT, PLAYING, RIGHT, UP, VALID_MOVES  # noqa: E402
from domain.game_state import GameSnapshot  # noqa: E402
from players import (  # noqa: E402
    AVAILABLE_PLAYERS,
    GreedyPlayer,
    Player,
    RandomPlayer,
    get_player_class,
    list_players,
)
from players.greedy_player import torus_distance  # noqa: E402
from players.random_player import safe_moves  # noqa: E402


def snapshot_for(snake, food=None, grid_size=20):
    return GameSnapshot(
        tick=0,
        snake=snake,
        food=food,
        alive=True,
        status=PLAYING,
        score=0,
        grid_size=grid_size
    )


class TestSafeMoves:
    """Tests for the shared safe-move helper."""

    def test_single_cell_can_go_anywhere(self):
        assert safe_moves(snapshot_for([(5, 5)])) == sorted(VALID_MOVES)

    def test_body_and_tail_block(self):
        """Both the neck and the tail count as blocking."""
        snapshot = snapshot_for([(5, 5), (4, 5), (4, 4), (5, 4)])
        assert safe_moves(snapshot) == sorted([DOWN, RIGHT])

    def test_edges_wrap_instead_of_blocking(self):
        """There are no walls: a head in the corner keeps all four moves."""
        assert safe_moves(snapshot_for([(0, 0)])) == sorted(VALID_MOVES)


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        player = RandomPlayer(random.Random(0))
        assert player.get_move(snapshot_for([(5, 5)], food=(3, 3))) in VALID_MOVES

    def test_random_player_avoids_self_collision(self):
        """RandomPlayer never steps into its own body while it has a choice."""
        player = RandomPlayer(random.Random(0))
        snapshot = snapshot_for([(5, 5), (4, 5), (4, 4)])

        for _ in range(50):
            assert player.get_move(snapshot) != LEFT

    def test_random_player_trapped_still_moves(self):
        """Boxed in on all sides, it still returns some direction."""
        player = RandomPlayer(random.Random(0))
        snake = [(1, 1), (1, 0), (0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)]
        snapshot = snapshot_for(snake, grid_size=20)
        # (1,1) neighbours: (1,0), (1,2), (0,1), (2,1) all occupied
        assert safe_moves(snapshot) == []
        assert player.get_move(snapshot) in VALID_MOVES

    def test_random_player_is_a_player(self):
        assert isinstance(RandomPlayer(), Player)
        with pytest.raises(NotImplementedError):
            Player().get_move(snapshot_for([(0, 0)]))


class TestGreedyPlayer:
    """Tests for the GreedyPlayer class."""

    def test_heads_toward_food(self):
        player = GreedyPlayer(random.Random(0))
        assert player.get_move(snapshot_for([(5, 5)], food=(8, 5))) == RIGHT
        assert player.get_move(snapshot_for([(5, 5)], food=(5, 1))) == UP

    def test_takes_shortcut_across_wrap(self):
        """From x=1 the food at x=18 is 3 cells away going left."""
        player = GreedyPlayer(random.Random(0))
        assert player.get_move(snapshot_for([(1, 5)], food=(18, 5))) == LEFT

    def test_avoids_body_even_when_closer(self):
        """The direct route is blocked, so it takes a detour."""
        player = GreedyPlayer(random.Random(0))
        snapshot = snapshot_for([(5, 5), (6, 5), (6, 6)], food=(9, 5))
        move = player.get_move(snapshot)
        assert move in {UP, DOWN, LEFT}
        assert move != RIGHT

    def test_no_food_falls_back_to_random(self):
        player = GreedyPlayer(random.Random(0))
        assert player.get_move(snapshot_for([(5, 5)], food=None)) in VALID_MOVES

    def test_torus_distance(self):
        assert torus_distance((1, 5), (18, 5), 20) == 3
        assert torus_distance((0, 0), (10, 10), 20) == 20
        assert torus_distance((3, 3), (3, 3), 20) == 0


class TestPlayerRegistry:
    """Tests for the player registry."""

    def test_known_keys(self):
        assert get_player_class("random") is RandomPlayer
        assert get_player_class("greedy") is GreedyPlayer
        assert get_player_class(" Random ") is RandomPlayer

    def test_default_is_greedy(self):
        assert get_player_class(None) is GreedyPlayer
        assert get_player_class("") is GreedyPlayer

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="Unknown player"):
            get_player_class("telepathic")

    def test_list_players_matches_registry(self):
        assert [p["key"] for p in list_players()] == AVAILABLE_PLAYERS
