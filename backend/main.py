import argparse
import json
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from config import configure_logging, load_settings
from domain import (
    DEAD,
    GRID_SIZE,
    PLAYING,
    TICK_INTERVAL_MS,
    GameSnapshot,
    GameState,
    ManualClock,
    SimulationClock,
)
from players import Player, get_player_class
from services.replay_storage import save_replay

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 1000


class SnakeGame:
    """
    Runs a GameState headless with an autoplay player.

    Manages:
      - The game state, driven by a manual clock (no sleeping)
      - The player supplying directional intent
      - Tick count and history for replay
    """

    def __init__(
        self,
        player: Player,
        rng=None,
        max_ticks: int = DEFAULT_MAX_TICKS,
        game_id: Optional[str] = None
    ):
        self.player = player
        self.max_ticks = max_ticks
        self.time_source = ManualClock()
        self.state = GameState(
            rng=rng,
            clock=SimulationClock(TICK_INTERVAL_MS, self.time_source)
        )
        self.game_over = False
        self.end_reason: Optional[str] = None
        self.start_time = time.time()
        self.history: List[GameSnapshot] = []

        if game_id is None:
            self.game_id = str(uuid.uuid4())
        else:
            self.game_id = game_id
        logger.info(f"Game ID: {self.game_id}")

        self.record_history()

    def run_round(self):
        """
        Execute one tick:
          1) If game is over, do nothing
          2) Ask the player for a direction
          3) Move the clock past one tick interval
          4) Poll the game state and record the result
          5) End the game on death, a full board, or the tick limit
        """
        if self.game_over:
            logger.debug("Game is already over. No more rounds.")
            return

        move = self.player.get_move(self.state.snapshot())
        self.state.set_heading(move)

        # Just past the interval: the gate opens strictly after it
        self.time_source.advance_ms(TICK_INTERVAL_MS + 1)
        result = self.state.update()
        if result.advanced:
            self.record_history()

        if self.state.status != PLAYING:
            self.end_game("Snake died." if self.state.status == DEAD else "Board is full.")
        elif self.state.tick >= self.max_ticks:
            self.end_game("Reached max ticks.")

    def end_game(self, reason: str):
        self.game_over = True
        self.end_reason = reason
        logger.info(f"Game Over: {reason} Score: {self.state.score}, length: {len(self.state.body)}")

    def record_history(self):
        self.history.append(self.state.snapshot())

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.state.snapshot().print_board() + "\n")

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the list of snapshots to a JSON-serializable list of dicts.
        """
        return [snapshot.to_dict() for snapshot in self.history]

    def replay_data(self) -> Dict[str, Any]:
        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "player": getattr(self.player, 'name', self.player.__class__.__name__),
            "end_reason": self.end_reason,
            "final_score": self.state.score,
            "final_status": self.state.status,
            "grid_size": GRID_SIZE,
            "tick_interval_ms": TICK_INTERVAL_MS,
            "max_ticks": self.max_ticks,
            "actual_ticks": self.state.tick,
        }
        return {
            "metadata": metadata,
            "rounds": self.serialize_history()
        }

    def save_history_to_json(self, directory: str) -> str:
        return save_replay(self.game_id, self.replay_data(), directory)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(game_params: argparse.Namespace) -> Dict:
    """
    Runs a single headless game with an autoplay player.

    Args:
        game_params: An object (like argparse.Namespace) containing
                     player, max_ticks, seed, print_board, save and replay_dir.

    Returns:
        A dictionary summarizing the game (game_id, score, length, status, ticks).
    """
    settings = load_settings()
    seed = getattr(game_params, 'seed', None)
    if seed is not None:
        settings.seed = seed
    rng = settings.make_rng()

    player_class = get_player_class(getattr(game_params, 'player', None))
    player = player_class(rng)

    game = SnakeGame(
        player=player,
        rng=rng,
        max_ticks=getattr(game_params, 'max_ticks', DEFAULT_MAX_TICKS),
        game_id=getattr(game_params, 'game_id', None)
    )

    show_board = getattr(game_params, 'print_board', False)
    while not game.game_over:
        game.run_round()
        if show_board:
            game.print_board()

    summary = {
        "game_id": game.game_id,
        "score": game.state.score,
        "length": len(game.state.body),
        "status": game.state.status,
        "ticks": game.state.tick,
    }

    if getattr(game_params, 'save', True):
        replay_dir = getattr(game_params, 'replay_dir', None) or settings.replay_dir
        summary["replay_path"] = game.save_history_to_json(replay_dir)

    return summary


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless torus snake game with an autoplay player."
    )
    parser.add_argument("--player", type=str, required=False, default="greedy",
                        help="Autoplay player: 'random' or 'greedy'")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, required=False,
                        default=DEFAULT_MAX_TICKS, help="Maximum number of ticks")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement and the player (overrides SNAKE_SEED)")
    parser.add_argument("--print-board", dest="print_board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--no-save", dest="save", action="store_false",
                        help="Don't write the replay JSON")
    parser.add_argument("--replay-dir", dest="replay_dir", type=str, default=None,
                        help="Replay directory (overrides SNAKE_REPLAY_DIR)")

    args = parser.parse_args()

    configure_logging(load_settings().log_level)

    if args.max_ticks <= 0:
        raise ValueError("--max-ticks must be positive.")

    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
