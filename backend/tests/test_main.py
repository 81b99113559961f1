"""
Tests for main.py - the headless game runner.
"""

import argparse
import json
import os
import random
import sys
from collections import deque
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import DEAD, LEFT, PLAYING, UP  # noqa: E402
from domain.coordinate import Coordinate  # noqa: E402
from main import SnakeGame, run_simulation  # noqa: E402


def mock_player(direction):
    player = Mock()
    player.get_move = Mock(return_value=direction)
    player.name = "TestPlayer"
    return player


class TestSnakeGame:
    """Tests for the SnakeGame runner."""

    def test_game_initialization(self):
        game = SnakeGame(player=mock_player(LEFT), rng=random.Random(0), game_id="g-1")

        assert game.game_id == "g-1"
        assert game.game_over is False
        assert game.state.status == PLAYING
        assert len(game.history) == 1

    def test_generates_game_id(self):
        game = SnakeGame(player=mock_player(LEFT), rng=random.Random(0))
        assert isinstance(game.game_id, str) and len(game.game_id) > 0

    def test_each_round_executes_one_tick(self):
        """run_round advances the clock past one interval, so the snake moves every round."""
        game = SnakeGame(player=mock_player(LEFT), rng=random.Random(0), max_ticks=25)

        while not game.game_over:
            game.run_round()

        # 25 moves left from x=10 wraps to x=5
        assert game.state.head == (5, 10)
        assert game.state.tick == 25
        assert game.end_reason == "Reached max ticks."
        assert len(game.history) == 26

    def test_player_consulted_every_round(self):
        player = mock_player(LEFT)
        game = SnakeGame(player=player, rng=random.Random(0), max_ticks=3)

        while not game.game_over:
            game.run_round()

        assert player.get_move.call_count == 3

    def test_death_ends_game(self):
        game = SnakeGame(player=mock_player(UP), rng=random.Random(0))
        game.state.snake.positions = deque(Coordinate(*p) for p in [(5, 5), (6, 5), (6, 4), (5, 4)])

        game.run_round()

        assert game.game_over is True
        assert game.state.status == DEAD
        assert game.end_reason == "Snake died."

        # Game over: further rounds are no-ops
        game.run_round()
        assert game.state.tick == 1

    def test_replay_data(self):
        game = SnakeGame(player=mock_player(LEFT), rng=random.Random(0), max_ticks=2, game_id="g-2")
        while not game.game_over:
            game.run_round()

        data = game.replay_data()

        assert data["metadata"]["game_id"] == "g-2"
        assert data["metadata"]["player"] == "TestPlayer"
        assert data["metadata"]["actual_ticks"] == 2
        assert data["metadata"]["tick_interval_ms"] == 200
        assert [r["tick"] for r in data["rounds"]] == [0, 1, 2]
        json.dumps(data)

    def test_save_history_to_json(self, tmp_path):
        game = SnakeGame(player=mock_player(LEFT), rng=random.Random(0), max_ticks=1, game_id="g-3")
        game.run_round()

        path = game.save_history_to_json(str(tmp_path))

        assert path == os.path.join(str(tmp_path), "snake_game_g-3.json")
        with open(path) as f:
            saved = json.load(f)
        assert saved["metadata"]["final_score"] == game.state.score
        assert len(saved["rounds"]) == 2

    def test_print_board(self, capsys):
        game = SnakeGame(player=mock_player(LEFT), rng=random.Random(0))
        game.print_board()
        assert "H" in capsys.readouterr().out


class TestRunSimulation:
    """Tests for run_simulation()."""

    def test_run_simulation_summary(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SNAKE_SEED", raising=False)
        params = argparse.Namespace(
            player="greedy",
            max_ticks=50,
            seed=7,
            print_board=False,
            save=True,
            replay_dir=str(tmp_path)
        )

        result = run_simulation(params)

        assert set(result) >= {"game_id", "score", "length", "status", "ticks", "replay_path"}
        assert 1 <= result["ticks"] <= 50
        assert result["length"] == result["score"] + 1
        assert os.path.exists(result["replay_path"])

        with open(result["replay_path"]) as f:
            saved = json.load(f)
        assert len(saved["rounds"]) == result["ticks"] + 1

    def test_run_simulation_is_reproducible(self, monkeypatch):
        monkeypatch.delenv("SNAKE_SEED", raising=False)
        params = argparse.Namespace(player="random", max_ticks=40, seed=3, save=False)

        first = run_simulation(params)
        second = run_simulation(params)

        assert first["score"] == second["score"]
        assert first["ticks"] == second["ticks"]
        assert first["status"] == second["status"]
        assert "replay_path" not in first
